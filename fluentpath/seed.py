"""Starter catalogue inserted into an empty store."""

import structlog
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from fluentpath.domain.learning.entities.module import Level, Module
from fluentpath.domain.learning.entities.test import Test, TestContent, TestType
from fluentpath.infrastructure.learning.repositories.module_repository import ModuleRepository
from fluentpath.infrastructure.learning.repositories.test_repository import TestRepository
from fluentpath.models import Module as ModuleORM
from fluentpath.models import Test as TestORM

logger = structlog.get_logger(__name__)

DEMO_MODULES = [
    Module.create(
        title="Everyday Greetings",
        level=Level.BEGINNER,
        order=1,
        description="Say hello, introduce yourself and ask simple questions.",
        content="Hello! My name is Anna. Nice to meet you. How are you today?",
    ),
    Module.create(
        title="Present Simple",
        level=Level.BEGINNER,
        order=2,
        description="Talk about habits and facts.",
        content="We use the present simple for habits: I walk to school every day.",
    ),
    Module.create(
        title="Past Tenses in Stories",
        level=Level.INTERMEDIATE,
        order=1,
        description="Combine past simple and past continuous.",
        content="I was reading when the phone rang. It was my sister.",
    ),
    Module.create(
        title="Formal Correspondence",
        level=Level.ADVANCED,
        order=1,
        description="Register, tone and structure of formal letters.",
        content="I am writing to enquire about the position advertised on your website.",
    ),
]

DEMO_TESTS = [
    Test.create(
        title="Morning Routine",
        type=TestType.COMPREHENSION,
        level=Level.BEGINNER,
        content=TestContent.from_dict(
            {
                "passage": (
                    "Tom wakes up at seven o'clock. He eats bread and drinks tea. "
                    "Then he takes the bus to work."
                ),
                "questions": [
                    {
                        "question": "When does Tom wake up?",
                        "options": ["At six", "At seven", "At eight", "At nine"],
                        "correctAnswer": "At seven",
                    },
                    {
                        "question": "What does Tom drink?",
                        "options": ["Coffee", "Milk", "Tea", "Juice"],
                        "correctAnswer": "Tea",
                    },
                    {
                        "question": "How does Tom go to work?",
                        "options": ["By car", "On foot", "By train", "By bus"],
                        "correctAnswer": "By bus",
                    },
                ],
            }
        ),
    ),
    Test.create(
        title="My Favourite Place",
        type=TestType.ESSAY,
        level=Level.INTERMEDIATE,
        content=TestContent(
            prompt="Write 150-200 words about a place you love and explain why it matters to you."
        ),
    ),
    Test.create(
        title="Complaint to a Hotel",
        type=TestType.LETTER,
        level=Level.ADVANCED,
        content=TestContent(
            prompt=(
                "Write a formal letter to a hotel manager complaining about your stay "
                "and asking for a partial refund."
            )
        ),
    ),
]


def seed_demo_content(db: Session) -> None:
    """Insert the starter modules and tests unless the catalogue already has content."""
    if db.execute(select(func.count(ModuleORM.id))).scalar():
        return
    if db.execute(select(func.count(TestORM.id))).scalar():
        return

    module_repository = ModuleRepository(db)
    for module in DEMO_MODULES:
        module_repository.save(module)

    test_repository = TestRepository(db)
    for test in DEMO_TESTS:
        test_repository.save(test)

    logger.info("demo_content_seeded", modules=len(DEMO_MODULES), tests=len(DEMO_TESTS))
