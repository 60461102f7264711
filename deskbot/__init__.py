"""Chat bot building blocks: Telegram data types, reply markup, keyword handling and CPU monitoring."""

__version__ = "0.1.0"