"""Adapters exposing the capability registry to agent runtimes."""

from .langchain import to_langchain_tools

__all__ = ["to_langchain_tools"]
