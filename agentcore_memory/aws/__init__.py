"""AWS Bedrock AgentCore event store adapter."""

from .client import BedrockAgentCoreEventStore

__all__ = ["BedrockAgentCoreEventStore"]
