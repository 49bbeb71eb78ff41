"""NiceGUI entrypoint for the catalog web runtime."""

from __future__ import annotations

import argparse
import os

from nicegui import ui

from mycocat.app.controller import NAV_ITEMS, CatalogController, Page
from mycocat.domain.entities import CompanyRecord, IndustryReport, ResearchArticleRecord
from mycocat.utils.logging import configure_root
from mycocat.viewmodels import catalog_format as fmt
from mycocat.viewmodels.browser_vm import BrowserVM
from mycocat.viewmodels.company_browser_vm import CompanyBrowserVM
from mycocat.viewmodels.research_browser_vm import ResearchBrowserVM
from mycocat.viewmodels.select_vm import SelectVM
from mycocat.web_ui.runtime import WebRuntime


def _install_theme() -> None:
    """Install global CSS/theme tokens for the web runtime."""
    ui.add_head_html(
        """
<style>
:root {
  --myco-green: #16a34a;
  --myco-green-dark: #15803d;
  --myco-border: #e5e7eb;
  --myco-muted: #4b5563;
}
.myco-header {
  background: linear-gradient(135deg, #16a34a 0%, #65a30d 100%);
  color: white;
}
.myco-page { max-width: 1280px; margin: 0 auto; width: 100%; }
.myco-card { border: 1px solid var(--myco-border); border-radius: 10px; transition: box-shadow 160ms ease; }
.myco-card:hover { box-shadow: 0 8px 24px rgba(0, 0, 0, 0.08); }
.myco-chip { border-radius: 6px; padding: 2px 8px; font-size: 12px; }
.myco-muted { color: var(--myco-muted); }
</style>
        """
    )


def _bind_select(select_vm: SelectVM, *, label: str, on_change) -> ui.select:
    """Render a dropdown whose open/closed state is tracked by ``select_vm``."""
    widget = ui.select(
        select_vm.option_map(),
        value=select_vm.value,
        label=label,
        on_change=lambda e: on_change(select_vm, str(e.value)),
    ).props("outlined dense")
    widget.on("popup-show", lambda _: select_vm.open())
    widget.on("popup-hide", lambda _: select_vm.close())
    return widget


def _company_card(company: CompanyRecord) -> None:
    with ui.card().classes("myco-card w-full"):
        with ui.row().classes("w-full justify-between items-start no-wrap"):
            with ui.column().classes("gap-0"):
                ui.label(company.name).classes("text-lg font-semibold")
                ui.label(fmt.company_subtitle(company)).classes("text-green-700 font-medium")
            with ui.column().classes("gap-0 items-end"):
                ui.label(fmt.founded_label(company)).classes("text-xs myco-muted")
                ui.label(fmt.employees_label(company)).classes("text-xs myco-muted")
        ui.label(company.products).classes("text-sm myco-muted")
        with ui.row().classes("gap-2"):
            if company.business_model:
                ui.label(company.business_model).classes("myco-chip bg-green-100 text-green-800")
            if company.stage:
                ui.label(company.stage).classes("myco-chip bg-blue-100 text-blue-800")
            ui.label(fmt.innovation_label(company)).classes("myco-chip bg-purple-100 text-purple-800")
        ui.label(company.description).classes("text-xs myco-muted")
        offer = fmt.affiliate_offer(company)
        if offer:
            ui.label(offer).classes("myco-chip bg-amber-100 text-amber-800")
        href = fmt.website_href(company.affiliate_url if company.affiliate else company.website)
        if href:
            ui.link("Visit Website →", href, new_tab=True).classes("text-green-700 text-sm font-medium")


def _article_card(article: ResearchArticleRecord) -> None:
    with ui.card().classes("myco-card w-full"):
        ui.label(article.title).classes("text-lg font-semibold")
        ui.label(fmt.article_subtitle(article)).classes("text-green-700 font-medium")
        if article.authors:
            ui.label(article.authors).classes("text-xs myco-muted")
        ui.label(article.summary).classes("text-sm myco-muted")
        with ui.row().classes("gap-2"):
            ui.label(article.category).classes("myco-chip bg-green-100 text-green-800")
            for keyword in article.keywords:
                ui.label(keyword).classes("myco-chip bg-blue-100 text-blue-800")
        if article.url:
            ui.link("Read Article →", article.url, new_tab=True).classes("text-green-700 text-sm")


def _report_card(report: IndustryReport) -> None:
    with ui.card().classes("myco-card w-full"):
        ui.label(report.title).classes("text-lg font-semibold")
        ui.label(report.description).classes("myco-muted")
        with ui.column().classes("gap-1"):
            for item in report.highlights:
                ui.label(f"• {item}").classes("text-sm myco-muted")
        if report.url:
            ui.link("Download Report", report.url, new_tab=True).classes("text-green-700 font-medium")


def _settings_dialog(runtime: WebRuntime, on_applied) -> ui.dialog:
    """Dialog editing the persisted settings; saving reloads the catalog."""
    current = runtime.settings_payload()
    with ui.dialog() as dialog, ui.card().classes("w-96"):
        ui.label("Settings").classes("text-lg font-semibold")
        data_dir = ui.input("Data directory", value=current["data_dir"]).props("outlined dense").classes("w-full")
        company_sort = ui.select(
            dict(CompanyBrowserVM.sort_options),
            value=current["default_company_sort"],
            label="Default company sort",
        ).props("outlined dense").classes("w-full")
        article_sort = ui.select(
            dict(ResearchBrowserVM.sort_options),
            value=current["default_article_sort"],
            label="Default article sort",
        ).props("outlined dense").classes("w-full")
        debug = ui.switch("Debug logging", value=current["debug_logging"])

        def save() -> None:
            try:
                runtime.apply_settings_payload(
                    {
                        "data_dir": data_dir.value or "",
                        "default_company_sort": company_sort.value,
                        "default_article_sort": article_sort.value,
                        "debug_logging": bool(debug.value),
                    }
                )
            except (OSError, ValueError) as exc:
                ui.notify(f"Settings not saved: {exc}", type="negative")
                return
            dialog.close()
            ui.notify(runtime.status_message, type="warning" if runtime.last_error else "positive")
            on_applied()

        with ui.row().classes("w-full justify-end"):
            ui.button("Cancel", on_click=dialog.close).props("flat")
            ui.button("Save", on_click=save).props("unelevated color=green-8")
    return dialog


def _build_ui(runtime: WebRuntime) -> None:
    """Register the NiceGUI pages for the runtime."""

    @ui.page("/")
    def index() -> None:
        controller: CatalogController = runtime.new_session_controller()

        def on_select(select_vm: SelectVM, value: str) -> None:
            select_vm.select(value)
            render_results.refresh()
            render_research_results.refresh()

        def on_search(vm: BrowserVM, value: str) -> None:
            vm.set_search_term(value)
            render_results.refresh()
            render_research_results.refresh()

        def clear_company_filters() -> None:
            controller.companies.clear_filters()
            render_company_controls.refresh()
            render_results.refresh()

        def go(page: str) -> None:
            controller.navigate(page)
            render_header.refresh()
            render_body.refresh()

        def on_settings_applied() -> None:
            controller.replace_catalog(runtime.catalog)
            render_body.refresh()

        settings_dialog = _settings_dialog(runtime, on_settings_applied)

        @ui.refreshable
        def render_header() -> None:
            with ui.column().classes("myco-header w-full py-8 px-4"):
                with ui.column().classes("myco-page"):
                    with ui.row().classes("w-full justify-between items-center"):
                        ui.label("Mushrooms.ink").classes("text-4xl font-bold")
                        with ui.row().classes("gap-2 items-center"):
                            if controller.show_back_button:
                                ui.button("← Back to Home", on_click=lambda: go(Page.HOME.value)).props(
                                    "outline color=white"
                                )
                            ui.button(icon="settings", on_click=settings_dialog.open).props("flat round color=white")
                    ui.label("Comprehensive Mushroom & Mycelium Company Database").classes("text-xl")
                    with ui.row().classes("gap-4 q-mt-md"):
                        for page, label in NAV_ITEMS:
                            active = controller.current_page is page
                            ui.button(label, on_click=lambda _, p=page.value: go(p)).props(
                                "unelevated color=white text-color=green-8" if active else "outline color=white"
                            )

        def render_stats() -> None:
            with ui.row().classes("myco-page w-full gap-4 py-8 px-4"):
                for value, caption in controller.companies.stat_tiles():
                    with ui.card().classes("myco-card col text-center p-6"):
                        ui.label(value).classes("text-2xl font-bold")
                        ui.label(caption).classes("text-sm myco-muted")

        @ui.refreshable
        def render_company_controls() -> None:
            vm = controller.companies
            with ui.row().classes("myco-page w-full gap-4 px-4 items-center"):
                ui.input(
                    placeholder="Search companies, products, technologies...",
                    value=vm.query.search_term,
                    on_change=lambda e: on_search(vm, str(e.value or "")),
                ).props("outlined dense clearable").classes("col")
                _bind_select(vm.filter_select, label="Filter by industry", on_change=on_select).classes("w-64")
                _bind_select(vm.sort_select, label="Sort by", on_change=on_select).classes("w-48")

        @ui.refreshable
        def render_results() -> None:
            vm = controller.companies
            with ui.column().classes("myco-page w-full px-4 py-4"):
                ui.label(vm.summary_label()).classes("text-sm myco-muted")
                with ui.grid(columns=3).classes("w-full gap-6"):
                    for company in vm.companies:
                        _company_card(company)
                if vm.is_empty:
                    with ui.column().classes("w-full items-center py-12"):
                        ui.label("No companies found matching your criteria.").classes("text-lg myco-muted")
                        ui.button("Clear Filters", on_click=clear_company_filters)

        @ui.refreshable
        def render_research_results() -> None:
            vm = controller.research
            with ui.column().classes("w-full"):
                ui.label(vm.summary_label()).classes("text-sm myco-muted")
                with ui.grid(columns=3).classes("w-full gap-6"):
                    for article in vm.articles:
                        _article_card(article)
                if vm.is_empty:
                    ui.label("No research articles found matching your criteria.").classes("myco-muted")

        def render_research() -> None:
            vm = controller.research
            with ui.column().classes("myco-page w-full py-8 px-4"):
                ui.label("Research Articles").classes("text-3xl font-bold")
                with ui.row().classes("w-full gap-4 items-center"):
                    ui.input(
                        placeholder="Search titles, authors, journals, keywords...",
                        value=vm.query.search_term,
                        on_change=lambda e: on_search(vm, str(e.value or "")),
                    ).props("outlined dense clearable").classes("col")
                    _bind_select(vm.filter_select, label="Filter by category", on_change=on_select).classes("w-64")
                    _bind_select(vm.sort_select, label="Sort by", on_change=on_select).classes("w-48")
                render_research_results()

        def render_reports() -> None:
            with ui.column().classes("myco-page w-full py-8 px-4"):
                ui.label("Industry Reports").classes("text-3xl font-bold")
                if not controller.reports:
                    ui.label("No industry reports available.").classes("myco-muted")
                with ui.grid(columns=2).classes("w-full gap-6"):
                    for report in controller.reports:
                        _report_card(report)

        @ui.refreshable
        def render_body() -> None:
            if runtime.last_error is not None:
                ui.label(runtime.status_message).classes("myco-page text-red-700 px-4 py-2")
            if controller.current_page is Page.HOME:
                render_stats()
                render_company_controls()
                render_results()
            elif controller.current_page is Page.RESEARCH:
                render_research()
            else:
                render_reports()

        render_header()
        render_body()
        with ui.footer().classes("bg-gray-800 text-white text-center"):
            with ui.column().classes("w-full items-center py-2"):
                ui.label("© Mushrooms.ink. All rights reserved.")
                ui.label(
                    "Disclaimer: The information provided on this website is for general "
                    "informational purposes only and does not constitute professional advice."
                ).classes("text-sm")


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the mycocat catalog web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--data-dir", default=None, help="Directory holding the catalog JSON files.")
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    configure_root()
    runtime = WebRuntime(data_dir=args.data_dir)
    if args.smoke_test:
        print("web-smoke-ok", runtime.counts())
        return
    _install_theme()
    _build_ui(runtime)
    ui.run(
        host=args.host,
        port=args.port,
        title="Mushrooms.ink",
        reload=args.reload,
        show=False,
        storage_secret=os.environ.get("MYCOCAT_WEB_STORAGE_SECRET", "mycocat-web-secret"),
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
