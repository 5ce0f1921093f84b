"""Parsing: tokenizer, per-command parsers and the command-word dispatcher."""

from roster.application.parsing.command_parser import CommandParser
from roster.application.parsing.tokenizer import ArgumentMultimap, Prefix, tokenize

__all__ = ["ArgumentMultimap", "CommandParser", "Prefix", "tokenize"]
