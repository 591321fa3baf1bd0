from kube_bot.modules.kubectl.commands import DEFINITIONS, LogDirection

__all__ = ["DEFINITIONS", "LogDirection"]
