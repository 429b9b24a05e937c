"""Screen configuration operations, including the active-configuration pointer."""

from __future__ import annotations

import logging

from homescreen.repos.crud_service import CrudService, GetByIdFn, create_crud_service
from homescreen.repos.document_model import Document, DocumentModel
from homescreen.repos.registry import DocumentModels
from homescreen.utils.document_formatter import FormattedDocument, format_document

logger = logging.getLogger(__name__)


class ScreenConfigurationRepo:
    """CRUD for screen configurations plus set/get of the active one."""

    def __init__(self, models: DocumentModels) -> None:
        self._configurations = models.screen_configuration
        self._sections = models.section
        self._movies = models.movie
        self._active = models.active_config
        self.service: CrudService = create_crud_service(
            model=self._configurations,
            entity_name="ScreenConfiguration",
            custom_get_by_id=self._get_by_id_fn(),
        )

    def _get_by_id_fn(self) -> GetByIdFn:
        async def get_by_id(config_id: str) -> FormattedDocument | None:
            try:
                configuration = await self._configurations.find_by_id(config_id)
                if configuration is None:
                    return None
                return _format_populated(await self._populate(configuration))
            except Exception:
                logger.exception("Error fetching screen configuration by id")
                raise

        return get_by_id

    async def _populate(self, configuration: Document) -> Document:
        """Replace section ids with sections, and each section's item ids with movies."""
        [configuration] = await self._configurations.populate([configuration], "sections", self._sections)
        sections = await self._sections.populate(configuration["sections"], "items", self._movies)
        return {**configuration, "sections": sections}

    async def set_active(self, config_id: str) -> FormattedDocument | None:
        """
        Mark a configuration as the active one.

        Concurrent calls are last-write-wins on the singleton pointer.

        Args:
            config_id: Screen configuration id

        Returns:
            The configuration, or None if it does not exist (pointer untouched)
        """
        try:
            configuration = await self._configurations.find_by_id(config_id)
            if configuration is None:
                return None

            await self._active.find_one_and_upsert(
                {},
                {"screenConfigId": configuration["_id"]},
            )
            logger.info("Active screen configuration set to %s", config_id)
            return format_document(configuration)
        except Exception:
            logger.exception("Error setting active screen configuration")
            raise

    async def get_active(self) -> FormattedDocument | None:
        """
        Get the active configuration with sections and their movies populated.

        Returns:
            Formatted configuration, or None if none is active or it was deleted
        """
        try:
            pointer = await self._active.find_one()
            if pointer is None:
                return None

            configuration = await self._configurations.find_by_id(pointer["screenConfigId"])
            if configuration is None:
                return None

            return _format_populated(await self._populate(configuration))
        except Exception:
            logger.exception("Error fetching active screen configuration")
            raise


def _format_populated(configuration: Document) -> FormattedDocument:
    sections = [
        {**format_document(section), "items": [format_document(movie) for movie in section["items"]]}
        for section in configuration["sections"]
    ]
    return {**format_document(configuration), "sections": sections}
