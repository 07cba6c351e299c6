"""
Purpose: Wrap question-service calls with retry/back-off, falling back to local generation.
Dependencies: requests, time, core/questions.
Ext Hooks: Per-class question sets stored server-side.
Client Only: HTTP client with resilience.
"""

import requests
import time
from typing import Optional, Dict, Any
from core.questions.generators import generate_question
from core.questions.question import Question


class NetworkClient:
    def __init__(self, base_url: str, max_retries: int = 3, retry_delay: float = 1.0, backoff_factor: float = 2.0):
        self.base_url = base_url.rstrip('/')
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.backoff_factor = backoff_factor

    def post_with_retry(self, endpoint: str, data: Dict[str, Any], timeout: float = 5.0) -> Optional[Dict[str, Any]]:
        """Post with exponential backoff retry."""
        url = f"{self.base_url}{endpoint}"
        delay = self.retry_delay
        for attempt in range(self.max_retries):
            try:
                response = requests.post(url, json=data, timeout=timeout)
                if response.status_code == 200:
                    return response.json()
                else:
                    print(f"Server error {response.status_code} on attempt {attempt + 1}")
            except requests.exceptions.RequestException as e:
                print(f"Network error on attempt {attempt + 1}: {e}")

            if attempt < self.max_retries - 1:
                print(f"Retrying in {delay} seconds...")
                time.sleep(delay)
                delay *= self.backoff_factor
        return None


class RemoteQuestionSource:
    """
    Question source for QuestionEngine backed by the question service.

    Once the service fails to answer, the source marks itself offline and
    generates locally for the rest of the session instead of stalling every
    challenge tile on retries.
    """

    def __init__(self, client: NetworkClient, rng=None):
        self.client = client
        self.rng = rng
        self.server_offline = False

    def __call__(self, difficulty: str, subject: str, grade_level: str) -> Question:
        if not self.server_offline:
            result = self.client.post_with_retry("/api/question", {
                "difficulty": difficulty,
                "subject": subject,
                "grade": grade_level,
            })
            if result and "prompt" in result:
                return Question.from_dict(result)
            print("Question service unavailable, generating questions locally")
            self.server_offline = True
        if self.rng is not None:
            return generate_question(difficulty, subject, grade_level, self.rng)
        return generate_question(difficulty, subject, grade_level)
