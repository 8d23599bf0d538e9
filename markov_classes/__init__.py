"""Communicating-class analysis of finite discrete-time Markov chains."""

__version__ = "0.1.0"
