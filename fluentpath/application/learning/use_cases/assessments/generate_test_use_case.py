"""Use case creating tests with the text-generation service."""

import structlog

from fluentpath.application.learning.protocols.test_repository import TestRepositoryProtocol
from fluentpath.application.learning.protocols.text_generation_service import (
    TextGenerationServiceProtocol,
)
from fluentpath.domain.learning.entities.module import Level
from fluentpath.domain.learning.entities.test import Test, TestType
from fluentpath.exceptions import ValidationError

MAX_GENERATED_QUESTIONS = 20

logger = structlog.get_logger(__name__)


class GenerateTestUseCase:
    def __init__(
        self,
        test_repository: TestRepositoryProtocol,
        text_generation_service: TextGenerationServiceProtocol,
    ) -> None:
        self.test_repository = test_repository
        self.text_generation_service = text_generation_service

    async def generate_test(self, test_type: TestType, level: Level, count: int = 10) -> Test:
        """
        Generate and store a new test.

        Nothing is stored when generation fails.

        Raises:
            ValidationError: If count is out of range
            GenerationFailedError: If the text-generation service fails
        """
        if not 1 <= count <= MAX_GENERATED_QUESTIONS:
            raise ValidationError(f"Question count must be between 1 and {MAX_GENERATED_QUESTIONS}")

        content = await self.text_generation_service.generate_test_content(test_type, level, count)

        test = Test.create(
            title=Test.generated_title(test_type, level),
            type=test_type,
            level=level,
            content=content,
        )
        test = self.test_repository.save(test)

        logger.info(
            "test_generated",
            test_id=test.id.value,
            test_type=test_type.value,
            level=level.value,
            question_count=len(content.questions),
        )
        return test
