from kube_bot.modules.general.commands import DEFINITIONS

__all__ = ["DEFINITIONS"]
