"""bizbook: book-keeping for a home-based service business."""

__version__ = "0.1.0"
