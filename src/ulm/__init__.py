"""ulm: unigram language model subword tokenizer."""

__version__ = "0.1.0"
