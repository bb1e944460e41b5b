"""Language model query client."""

from entity_scanner.llm.client import ModelQueryClient, ModelReply, get_openai_client

__all__ = ["ModelQueryClient", "ModelReply", "get_openai_client"]
