from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.entities import Catalog
from ..domain.ports import DatasetPort, UseCaseError
from .error_mapping import map_dataset_error

log = logging.getLogger(__name__)


@dataclass
class LoadCatalog:
    """Load every static dataset once and bundle them into a :class:`Catalog`."""

    dataset: DatasetPort

    def __call__(self) -> Catalog:
        try:
            catalog = Catalog(
                companies=tuple(self.dataset.load_companies()),
                articles=tuple(self.dataset.load_articles()),
                reports=tuple(self.dataset.load_reports()),
            )
        except Exception as exc:
            err = map_dataset_error(exc, default_code="LOAD_CATALOG_FAILED")
            log.error("Catalog load failed [%s]: %s", err.code, err.message)
            raise err from exc
        log.info(
            "Catalog ready: %d companies, %d research rows, %d reports",
            len(catalog.companies),
            len(catalog.articles),
            len(catalog.reports),
        )
        return catalog


__all__ = ["LoadCatalog", "UseCaseError"]
