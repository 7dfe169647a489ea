"""
Generic cached table accessor.

One :class:`Repository` is declared per table in
:mod:`frontdesk.services.tables`.  Reads return camelCase records (plain
dicts, JSON-safe) and are cached under ``table:<name>`` so that repeated
reads of a collection within the cache lifetime hit the cache instead of
the database.  Every mutation stamps ``updatedAt`` and drops the cached
collection, once straight away and once more when the surrounding
transaction commits.
"""
from __future__ import annotations

import datetime
import json
import logging
import uuid
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.core.cache import cache
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.serializers.json import DjangoJSONEncoder
from django.db import transaction
from django.db.models import F
from django.utils import timezone
from rest_framework.exceptions import NotFound

logger = logging.getLogger(__name__)


def _json_value(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if isinstance(value, uuid.UUID):
        return str(value)
    return value


class Repository:
    def __init__(self, model, table: str, fields: Dict[str, str], label: Optional[str] = None):
        self.model = model
        self.table = table
        # camelCase record key -> snake_case column
        self.fields = fields
        self.label = label or model.__name__

    @property
    def cache_key(self) -> str:
        return f'table:{self.table}'

    def to_record(self, obj) -> Dict[str, Any]:
        record = {'id': str(obj.pk)}
        for key, column in self.fields.items():
            record[key] = _json_value(getattr(obj, column))
        record['createdAt'] = _json_value(obj.created_at)
        record['updatedAt'] = _json_value(obj.updated_at)
        return record

    def to_columns(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Map the keys present in a camelCase patch onto columns."""
        return {column: data[key] for key, column in self.fields.items() if key in data}

    def all(self) -> List[Dict[str, Any]]:
        rows = cache.get(self.cache_key)
        if rows is None:
            qs = self.model.objects.order_by(F('created_at').desc(nulls_last=True))
            rows = [self.to_record(obj) for obj in qs]
            cache.set(self.cache_key, rows, settings.HMS_TABLE_CACHE_SECONDS)
        return rows

    def _lookup(self, pk):
        try:
            return self.model.objects.filter(pk=pk).first()
        except (ValueError, DjangoValidationError):
            # malformed id
            return None

    def _get_obj(self, pk):
        obj = self._lookup(pk)
        if obj is None:
            raise NotFound(f'{self.label} not found')
        return obj

    def get(self, pk) -> Dict[str, Any]:
        return self.to_record(self._get_obj(pk))

    def add(self, data: Dict[str, Any]) -> Dict[str, Any]:
        now = timezone.now()
        obj = self.model.objects.create(created_at=now, updated_at=now, **self.to_columns(data))
        self._invalidate_after_write()
        logger.info("Created %s %s", self.label, obj.pk)
        return self.to_record(obj)

    def update(self, pk, data: Dict[str, Any]) -> Dict[str, Any]:
        obj = self._get_obj(pk)
        columns = self.to_columns(data)
        for column, value in columns.items():
            setattr(obj, column, value)
        obj.updated_at = timezone.now()
        obj.save(update_fields=[*columns, 'updated_at'])
        self._invalidate_after_write()
        logger.info("Updated %s %s (%s)", self.label, obj.pk, ', '.join(sorted(columns)) or 'no fields')
        return self.to_record(obj)

    def delete(self, pk) -> None:
        obj = self._get_obj(pk)
        obj.delete()
        # the row is gone from the store; only now drop it from the cached collection
        self._invalidate_after_write()
        logger.info("Deleted %s %s", self.label, pk)

    def snapshot(self, pk) -> Optional[Dict[str, Any]]:
        obj = self._lookup(pk)
        if obj is None:
            return None
        row = {f.attname: f.value_from_object(obj) for f in obj._meta.concrete_fields}
        return json.loads(json.dumps(row, cls=DjangoJSONEncoder))

    def invalidate(self) -> None:
        cache.delete(self.cache_key)

    def _invalidate_after_write(self) -> None:
        # Drop now so this transaction reads its own writes, and again on
        # commit in case another connection re-cached the old rows meanwhile.
        self.invalidate()
        transaction.on_commit(self.invalidate)

    def find(self, pk) -> Optional[Dict[str, Any]]:
        """Linear scan of the cached collection by id."""
        pk = str(pk)
        for record in self.all():
            if record['id'] == pk:
                return record
        return None
