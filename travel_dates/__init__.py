"""Travel dates selector: exact-range and flexible-window date picking for tour search."""

__version__ = "1.0.0"
