from dotenv import load_dotenv
from slack_bolt import App
from slack_bolt.adapter.socket_mode import SocketModeHandler

from kube_bot import __version__
from kube_bot.infrastructure.commands import CommandParser
from kube_bot.infrastructure.configuration import settings
from kube_bot.infrastructure.logging import get_module_logger
from kube_bot.modules import chat
from kube_bot.modules.loader import load_registry

logger = get_module_logger()

load_dotenv()


def main():
    """Load the command registry and serve Slack events over Socket Mode."""
    logger.info(
        "application_startup",
        version=__version__,
        git_sha=settings.GIT_SHA,
        prefix=settings.PREFIX,
    )

    # a registry that fails to load aborts startup
    parser = CommandParser(load_registry())

    bot = App(token=settings.slack.SLACK_TOKEN)
    chat.register(bot, parser)

    SocketModeHandler(bot, settings.slack.APP_TOKEN).start()


if __name__ == "__main__":
    main()
