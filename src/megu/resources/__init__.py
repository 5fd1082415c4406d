"""Data files bundled with megu (the builtin extension registry)."""
