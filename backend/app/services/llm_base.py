"""
Rural Sports Backend: Abstract LLM Service Interface
=====================================================

What:  The contract the sports-expert consultation relies on.
Why:   ConsultService only needs "prompt in, answer out"; the provider
       (Gemini today) stays swappable and tests substitute a mock.
How:   Concrete implementations inherit from LLMService and implement
       generate() and health_check().
"""

from abc import ABC, abstractmethod


class LLMService(ABC):
    """
    Contract:
        - generate() returns the model's plain-text answer, never None
        - implementations own their retry logic and error translation
        - provider errors surface as LLMServiceError or CircuitBreakerOpenError
    """

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """
        Answer a free-text question.

        Raises:
            LLMServiceError: the provider failed after all retries
            CircuitBreakerOpenError: recent failures opened the circuit
        """
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """Lightweight reachability probe used by GET /health."""
        ...
