"""CreateCategory command handler.

Never fails: validation problems are reported inside the
CreateCategoryResult envelope (success=False) and nothing is inserted.
"""

from src.application.commands.category_commands import CreateCategory
from src.application.dtos.category_dtos import CreateCategoryResult
from src.application.errors import ApplicationError
from src.application.mappers.category_mapper import (
    category_to_created,
    create_category_command_to_entity,
)
from src.application.validators.category_validators import CreateCategoryValidator
from src.core.result import Result, Success
from src.domain.protocols.category_repository import CategoryRepository
from src.domain.protocols.logger_protocol import LoggerProtocol


class CreateCategoryMessage:
    """User-facing envelope messages."""

    VALIDATION_FAILED = "Category validation failed"
    CREATED = "Category created"


class CreateCategoryHandler:
    """Handler for CreateCategory command."""

    def __init__(
        self, category_repo: CategoryRepository, logger: LoggerProtocol
    ) -> None:
        self._category_repo = category_repo
        self._logger = logger
        self._validator = CreateCategoryValidator()

    async def handle(
        self, cmd: CreateCategory
    ) -> Result[CreateCategoryResult, ApplicationError]:
        """Handle CreateCategory command.

        Returns:
            Success(CreateCategoryResult): always. success=False with
            validation_errors when the command is invalid, otherwise
            success=True with the created category.
        """
        errors = await self._validator.validate(cmd)
        if errors:
            self._logger.info("category_create_rejected", error_count=len(errors))
            return Success(
                value=CreateCategoryResult(
                    success=False,
                    message=CreateCategoryMessage.VALIDATION_FAILED,
                    validation_errors=[e.message for e in errors],
                )
            )

        category = await self._category_repo.add(
            create_category_command_to_entity(cmd)
        )
        self._logger.info("category_created", category_id=str(category.id))

        return Success(
            value=CreateCategoryResult(
                success=True,
                message=CreateCategoryMessage.CREATED,
                category=category_to_created(category),
            )
        )
