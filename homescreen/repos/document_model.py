"""
Collection binding for one resource type.

DocumentModel is the only place that talks to motor collections. It applies
the resource's DocumentSchema on every write and returns raw stored
documents; formatting for the API happens in the CRUD layer.
"""

from __future__ import annotations

from typing import Any

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument

from homescreen.db import MongoConnection
from homescreen.schemas.document_schema import ID_FIELD, DocumentSchema, to_object_id

Document = dict[str, Any]


class DocumentModel:
    """Persistence operations for one collection."""

    def __init__(
        self,
        name: str,
        schema: DocumentSchema,
        connection: MongoConnection,
        collection_name: str | None = None,
    ) -> None:
        """
        Args:
            name: Model name, used in references and error messages
            schema: Converted persistence schema
            connection: Owning MongoConnection
            collection_name: Defaults to the lowercased plural of ``name``
        """
        self.name = name
        self.schema = schema
        self.connection = connection
        self.collection_name = collection_name or f"{name.lower()}s"

    @property
    def collection(self) -> AsyncIOMotorCollection:
        return self.connection.database[self.collection_name]

    async def find(self, query: dict[str, Any] | None = None, sort: dict[str, int] | None = None) -> list[Document]:
        """
        Find all documents matching ``query``.

        Args:
            query: Mongo query document
            sort: field -> 1 (asc) / -1 (desc); applied in insertion order

        Returns:
            Matching documents, possibly empty
        """
        cursor = self.collection.find(query or {}, sort=list(sort.items()) if sort else None)
        return [doc async for doc in cursor]

    async def find_one(self, query: dict[str, Any] | None = None) -> Document | None:
        return await self.collection.find_one(query or {})

    async def find_by_id(self, doc_id: Any) -> Document | None:
        """Return the document, or None when missing or the id is malformed."""
        oid = to_object_id(doc_id)
        if oid is None:
            return None
        return await self.collection.find_one({ID_FIELD: oid})

    async def create(self, data: dict[str, Any]) -> Document:
        """Validate and insert ``data`` as a new document."""
        doc = self.schema.prepare_insert(self.name, data)
        result = await self.collection.insert_one(doc)
        doc[ID_FIELD] = result.inserted_id
        return doc

    async def find_by_id_and_update(self, doc_id: Any, data: dict[str, Any]) -> Document | None:
        """
        Merge ``data`` into the document.

        Returns:
            The document after the update, or None if it does not exist
        """
        oid = to_object_id(doc_id)
        if oid is None:
            return None
        changes = self.schema.prepare_update(self.name, data)
        return await self.collection.find_one_and_update(
            {ID_FIELD: oid},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )

    async def find_by_id_and_delete(self, doc_id: Any) -> Document | None:
        """Delete the document and return it, or None if it does not exist."""
        oid = to_object_id(doc_id)
        if oid is None:
            return None
        return await self.collection.find_one_and_delete({ID_FIELD: oid})

    async def find_one_and_upsert(self, query: dict[str, Any], data: dict[str, Any]) -> Document:
        """Update the first document matching ``query``, creating it if none does."""
        changes = self.schema.prepare_update(self.name, data)
        return await self.collection.find_one_and_update(
            query,
            {"$set": changes},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )

    async def populate(self, docs: list[Document], path: str, target: DocumentModel) -> list[Document]:
        """
        Replace the reference list at ``path`` with the referenced documents.

        Reference order is kept; references to missing documents are dropped.
        Returns new dicts; ``docs`` are not modified.
        """
        refs = {
            str(oid): oid
            for doc in docs
            for ref in doc.get(path) or []
            if (oid := to_object_id(ref)) is not None
        }
        found = await target.find({ID_FIELD: {"$in": list(refs.values())}}) if refs else []
        by_id = {str(item[ID_FIELD]): item for item in found}

        populated = []
        for doc in docs:
            items = [by_id[str(ref)] for ref in doc.get(path) or [] if str(ref) in by_id]
            populated.append({**doc, path: items})
        return populated
