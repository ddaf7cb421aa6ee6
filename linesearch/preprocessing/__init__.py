"""Line tokenization."""

from .line_tokenizer import LineTokenizer

__all__ = ['LineTokenizer']
