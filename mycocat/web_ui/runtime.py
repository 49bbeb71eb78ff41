"""NiceGUI runtime orchestration for the catalog browser.

This module composes settings, the dataset adapter, the load use case and the
root controller. It imports no UI toolkit so it can be exercised headless.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping, Optional

from mycocat.adapters.dataset_json import DatasetJson, resolve_data_dir
from mycocat.adapters.storage_local import StorageLocal
from mycocat.app.controller import CatalogController
from mycocat.domain.entities import Catalog
from mycocat.domain.ports import UseCaseError
from mycocat.usecases.load_catalog import LoadCatalog
from mycocat.utils.logging import apply_preferences
from mycocat.viewmodels.settings_vm import SettingsVM


LOGGER = logging.getLogger(__name__)


class WebRuntime:
    """Orchestration state used by NiceGUI views."""

    def __init__(
        self,
        *,
        data_dir: Optional[str] = None,
        settings_root: Optional[str] = None,
    ) -> None:
        self.status_message = "Ready."
        self.last_error: Optional[UseCaseError] = None

        self.settings_vm = SettingsVM()
        self.storage = StorageLocal(
            root_dir=settings_root or os.environ.get("MYCOCAT_SETTINGS_ROOT") or "."
        )
        self._load_settings_defaults()
        if data_dir:
            self.settings_vm.data_dir = data_dir
        apply_preferences(self.settings_vm.debug_logging)

        self.controller = CatalogController(
            company_sort=self.settings_vm.default_company_sort,
            article_sort=self.settings_vm.default_article_sort,
        )
        self.reload_catalog()

    # ------------------------------------------------------------------
    # Basic projections
    # ------------------------------------------------------------------
    @property
    def catalog(self) -> Catalog:
        return self.controller.catalog

    @property
    def data_dir(self) -> str:
        return resolve_data_dir(self.settings_vm.data_dir)

    def new_session_controller(self) -> CatalogController:
        """Controller for one browser tab; query state is never shared between tabs."""
        return CatalogController(
            self.catalog,
            company_sort=self.settings_vm.default_company_sort,
            article_sort=self.settings_vm.default_article_sort,
        )

    def settings_payload(self) -> Dict[str, Any]:
        return self.settings_vm.to_dict()

    def counts(self) -> Dict[str, int]:
        return {
            "companies": len(self.catalog.companies),
            "articles": self.controller.research.view.total,
            "reports": len(self.catalog.reports),
        }

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def reload_catalog(self) -> bool:
        """(Re)load every dataset; on failure keep the previous catalog.

        Returns:
            ``True`` when the catalog loaded, ``False`` when a ``UseCaseError``
            was recorded in ``status_message``.
        """
        uc_load = LoadCatalog(self._build_dataset())
        try:
            catalog = uc_load()
        except UseCaseError as err:
            self.last_error = err
            self.status_message = f"Catalog unavailable: {err.message}"
            LOGGER.warning("Catalog load failed (%s) from %s", err.code, self.data_dir)
            return False
        self.last_error = None
        self.controller.replace_catalog(catalog)
        self.status_message = (
            f"Loaded {len(catalog.companies)} companies and "
            f"{self.controller.research.view.total} research articles."
        )
        return True

    def apply_settings_payload(self, payload: Mapping[str, Any]) -> None:
        self.settings_vm.apply_dict(payload)
        apply_preferences(self.settings_vm.debug_logging)
        self.storage.save_user_settings(self.settings_vm.to_dict())
        self.reload_catalog()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _build_dataset(self) -> DatasetJson:
        cfg = self.settings_vm.config
        return DatasetJson(
            self.data_dir,
            companies_file=cfg.companies_file,
            affiliates_file=cfg.affiliates_file,
            articles_file=cfg.articles_file,
            reports_file=cfg.reports_file,
        )

    def _load_settings_defaults(self) -> None:
        try:
            payload = self.storage.load_user_settings()
            self.settings_vm.apply_dict(payload)
        except (OSError, ValueError) as exc:
            LOGGER.warning("Ignoring unreadable settings at %s: %s", self.storage.settings_path, exc)


__all__ = ["WebRuntime"]
