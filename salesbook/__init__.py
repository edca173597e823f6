"""Terminal point-of-sale log for a small restaurant: sales storage, reports and a menu."""

__version__ = "0.1.0"