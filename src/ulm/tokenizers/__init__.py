"""Unigram language model tokenization."""

from .base import LoadError, Model, Token
from .hf_tokenizer import hf_encode, to_hf_tokenizer
from .lattice import Lattice, Node
from .normalizer import normalize_text, pre_tokenize
from .tokenizer import Tokenizer, load_model
from .trie import Trie, TrieBuilder
from .unigram import UNK_PENALTY, Unigram
from .vocab import read_json_vocab, read_spm_vocab

__all__ = [
    "LoadError",
    "Model",
    "Token",
    "Lattice",
    "Node",
    "Trie",
    "TrieBuilder",
    "Unigram",
    "UNK_PENALTY",
    "Tokenizer",
    "load_model",
    "read_json_vocab",
    "read_spm_vocab",
    "normalize_text",
    "pre_tokenize",
    "to_hf_tokenizer",
    "hf_encode",
]
