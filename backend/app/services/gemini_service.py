"""
Rural Sports Backend: Google Gemini Service Implementation
===========================================================

What:  Concrete LLM service answering villagers' sports and fitness questions
       through Google Gemini.
How:   A single text prompt goes to the model with a fixed system instruction
       (the "sports expert" persona); the call is wrapped in tenacity retry
       and guarded by an in-process circuit breaker.
Who:   Instantiated once at import; called by ConsultService and the health
       check.

Resilience Strategy:
    1. Tenacity retry with exponential backoff + jitter for transient failures
    2. Circuit breaker so a Gemini outage fails fast instead of stacking retries
    3. Per-call request timeout
    4. Per-call tracing id in every log line
"""

import logging
import time
import uuid
from typing import Optional

import google.generativeai as genai
from tenacity import (
    RetryError,
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from app.config import settings
from app.exceptions import CircuitBreakerOpenError, LLMServiceError
from app.services.llm_base import LLMService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Circuit Breaker Implementation
# ══════════════════════════════════════════════════════════════════════════

class CircuitBreaker:
    """
    Circuit breaker state machine.

        CLOSED     → failures counted; threshold reached → OPEN
        OPEN       → every call raises CircuitBreakerOpenError until
                     recovery_timeout has elapsed → HALF_OPEN
        HALF_OPEN  → one trial call; success → CLOSED, failure → OPEN

    Not thread-safe: state lives in plain attributes, which is fine for a
    single-process async worker.
    """

    CLOSED = "closed"
    OPEN = "open"
    HALF_OPEN = "half_open"

    def __init__(self, failure_threshold: int = 5, recovery_timeout: int = 60):
        self.failure_threshold = failure_threshold
        self.recovery_timeout = recovery_timeout
        self.failure_count = 0
        self.state = self.CLOSED
        self.last_failure_time: Optional[float] = None

    def can_execute(self) -> bool:
        """
        Returns True when a call may proceed.

        Raises:
            CircuitBreakerOpenError: OPEN and still inside the recovery window
        """
        if self.state == self.CLOSED:
            return True

        if self.state == self.OPEN:
            elapsed = time.time() - (self.last_failure_time or 0)
            if elapsed >= self.recovery_timeout:
                logger.info("Circuit breaker transitioning to HALF_OPEN after %.1fs", elapsed)
                self.state = self.HALF_OPEN
                return True
            remaining = int(self.recovery_timeout - elapsed)
            raise CircuitBreakerOpenError(recovery_time=remaining)

        return True

    def record_success(self) -> None:
        if self.state == self.HALF_OPEN:
            logger.info("Circuit breaker transitioning to CLOSED (service recovered)")
        self.failure_count = 0
        self.state = self.CLOSED
        self.last_failure_time = None

    def record_failure(self) -> None:
        self.failure_count += 1
        self.last_failure_time = time.time()

        if self.state == self.HALF_OPEN:
            logger.warning("Circuit breaker returning to OPEN (trial call failed)")
            self.state = self.OPEN
        elif self.failure_count >= self.failure_threshold:
            logger.warning(
                "Circuit breaker OPENING after %d consecutive failures",
                self.failure_count,
            )
            self.state = self.OPEN


# ══════════════════════════════════════════════════════════════════════════
# Gemini Service
# ══════════════════════════════════════════════════════════════════════════

class GeminiService(LLMService):
    """
    Error handling chain:
        API call fails → tenacity retries (settings.retry_max_attempts)
        → retries exhausted → circuit breaker failure → LLMServiceError
        → threshold reached → later calls rejected instantly (503)
    """

    SYSTEM_INSTRUCTION = (
        "You are a friendly sports and fitness expert advising people in rural "
        "villages. Give practical, safe advice that fits limited equipment and "
        "outdoor spaces: warm-ups, training plans, injury prevention, rules of "
        "common sports and ideas for community events. Keep answers short and "
        "concrete. If a question describes a medical emergency or serious "
        "injury, tell the person to see a doctor."
    )

    REQUEST_TIMEOUT_SECONDS = 60

    def __init__(self):
        if settings.gemini_api_key and settings.gemini_api_key != "your_gemini_api_key_here":
            genai.configure(api_key=settings.gemini_api_key)

        self.model = genai.GenerativeModel(
            settings.gemini_model,
            system_instruction=self.SYSTEM_INSTRUCTION,
        )

        self.circuit_breaker = CircuitBreaker(
            failure_threshold=settings.cb_failure_threshold,
            recovery_timeout=settings.cb_recovery_timeout,
        )

        logger.info(
            "GeminiService initialized with model=%s, "
            "circuit_breaker(threshold=%d, recovery=%ds)",
            settings.gemini_model,
            settings.cb_failure_threshold,
            settings.cb_recovery_timeout,
        )

    async def generate(self, prompt: str) -> str:
        """
        Ask the sports expert a question.

        Flow:
            1. Circuit breaker check (may raise CircuitBreakerOpenError)
            2. Model call with retry
            3. Record success/failure on the breaker

        Raises:
            CircuitBreakerOpenError: circuit is open
            LLMServiceError: Gemini failed after all retry attempts
        """
        request_id = str(uuid.uuid4())[:8]

        self.circuit_breaker.can_execute()

        logger.info("[%s] Starting Gemini consultation (%d chars)", request_id, len(prompt))

        try:
            answer = await self._call_gemini_with_retry(prompt, request_id)
        except RetryError as e:
            self.circuit_breaker.record_failure()
            last_error = e.last_attempt.exception() if e.last_attempt else None
            logger.error("[%s] All Gemini retries exhausted: %s", request_id, last_error or "Unknown error")
            raise LLMServiceError(
                message="The sports expert is unavailable right now. Please try again later.",
                retry_after=self.circuit_breaker.recovery_timeout,
                context={"request_id": request_id, "attempts": settings.retry_max_attempts},
            ) from e
        except Exception as e:
            self.circuit_breaker.record_failure()
            logger.error("[%s] Unexpected Gemini error: %s", request_id, str(e), exc_info=True)
            raise LLMServiceError(
                message="An unexpected error occurred while consulting the sports expert.",
                context={"request_id": request_id, "error_type": type(e).__name__},
            ) from e

        self.circuit_breaker.record_success()
        return answer

    @retry(
        # The SDK raises generic exceptions for API errors
        retry=retry_if_exception_type(Exception),
        stop=stop_after_attempt(settings.retry_max_attempts),
        wait=wait_exponential_jitter(
            initial=settings.retry_min_wait,
            max=settings.retry_max_wait,
            jitter=1,
        ),
        before_sleep=before_sleep_log(logger, logging.WARNING),
    )
    async def _call_gemini_with_retry(self, prompt: str, request_id: str) -> str:
        start_time = time.time()

        try:
            response = await self.model.generate_content_async(
                prompt,
                request_options={"timeout": self.REQUEST_TIMEOUT_SECONDS},
            )
            answer = response.text.strip() if response.text else ""
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.warning(
                "[%s] Gemini API call failed after %.0fms: %s",
                request_id,
                duration_ms,
                str(e),
            )
            raise

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            "[%s] Gemini consultation completed in %.0fms, answered %d chars",
            request_id,
            duration_ms,
            len(answer),
        )
        return answer

    async def health_check(self) -> bool:
        """List models: verifies key and connectivity without spending tokens."""
        try:
            model_names = [m.name for m in genai.list_models()]
        except Exception as e:
            logger.warning("Gemini health check failed: %s", str(e))
            return False

        target = f"models/{settings.gemini_model}"
        if target not in model_names:
            logger.warning("Configured model %s not found in available models", target)
        return True


# ── Singleton Instance ────────────────────────────────────────────────────
# Shared so the circuit breaker state spans requests
gemini_service = GeminiService()
