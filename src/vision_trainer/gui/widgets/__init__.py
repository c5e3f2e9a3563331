"""Editor widgets."""
