"""kube-bot: a chat bot interface to Kubernetes deployments."""

__version__ = "0.1.0"
