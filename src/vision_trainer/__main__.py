"""Allow ``python -m vision_trainer``."""
import sys

from vision_trainer.cli import main

if __name__ == "__main__":
    sys.exit(main())
