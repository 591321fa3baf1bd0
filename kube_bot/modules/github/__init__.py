from kube_bot.modules.github.commands import DEFINITIONS, AuthorFilter, ResultFilter

__all__ = ["DEFINITIONS", "AuthorFilter", "ResultFilter"]
