"""Agent interface."""

from unoheuristic.agent.protocol import AgentProtocol

__all__ = ["AgentProtocol"]
