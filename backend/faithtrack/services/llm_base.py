"""
Faithtrack Backend: Abstract Guidance Model Interface
=======================================================

What:  Abstract base class for chat-completion providers that answer
       faith questions.
How:   Concrete implementations inherit from GuidanceLLM and implement ask().
Who:   GrokService is the only implementation; search orchestration depends
       on this contract rather than on the provider.
"""

from abc import ABC, abstractmethod


class GuidanceLLM(ABC):
    """
    Contract:
        - ask() sends one question with the caller's credential and returns
          the answer text
        - A successful response with an unexpected shape yields a placeholder
          answer, never an exception
        - Every other failure is raised as UpstreamError
        - The credential is used for that one request only
    """

    @abstractmethod
    async def ask(self, query: str, api_key: str) -> str:
        """
        Ask the model one question.

        Args:
            query:   The user's question, sent as the user message.
            api_key: The user's provider credential for this request.

        Returns:
            The answer text, or the provider's placeholder answer when the
            response shape is unexpected.

        Raises:
            UpstreamError: non-success status, transport failure, or a body
                that is not JSON.
        """
        ...
