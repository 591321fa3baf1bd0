from kube_bot.modules.chat.chat import handle_message, normalize_message, register

__all__ = ["handle_message", "normalize_message", "register"]
