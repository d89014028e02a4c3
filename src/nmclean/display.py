"""Rich terminal display for nmclean."""

from rich.console import Console
from rich.markup import escape

from nmclean.models import CountReport, CountResult, DeleteReport, DeleteResult, SizeReport, SizeResult

console = Console(soft_wrap=True, highlight=False, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB", "PB"]


def format_bytes(size_bytes: int, decimals: int = 2) -> str:
    """Format bytes to human-readable string (binary steps of 1024)."""
    if size_bytes == 0:
        return "0 B"

    decimals = max(decimals, 0)
    value = float(size_bytes)
    unit = 0
    while value >= 1024 and unit < len(SIZE_UNITS) - 1:
        value /= 1024
        unit += 1

    return f"{value:.{decimals}f} {SIZE_UNITS[unit]}"


def pluralize(count: int, word: str) -> str:
    """Return ``word`` with an ``s`` unless count is exactly 1."""
    return word if count == 1 else f"{word}s"


def show_size_result(result: SizeResult) -> None:
    console.print(f"📦 {escape(result.path)}: {format_bytes(result.size_bytes)}")


def show_size_total(report: SizeReport) -> None:
    console.print(f"💻 TOTAL SIZE: {format_bytes(report.total_bytes)}")


def show_match_count(count: int) -> None:
    """Display how many node_modules folders were discovered."""
    console.print(f"🔍 Found {count} node_modules {pluralize(count, 'folder')}")


def show_count_result(result: CountResult) -> None:
    count = result.subfolder_count
    console.print(f"📂 {escape(result.path)}: contains {count} {pluralize(count, 'subfolder')}")


def show_count_report(report: CountReport) -> None:
    """Display the number of matches followed by one line per match."""
    show_match_count(report.match_count)
    for result in report.results:
        show_count_result(result)


def show_delete_result(result: DeleteResult) -> None:
    """Display result of a single deletion; failures go to stderr."""
    if result.success:
        console.print(f"🗑️ Deleted: {escape(result.path)}")
    else:
        err_console.print(f"❌ Failed to delete {escape(result.path)}: {escape(result.error or '')}")


def show_delete_summary(report: DeleteReport) -> None:
    """Display how many folders were processed (not how many succeeded)."""
    count = report.processed_count
    console.print(f"✅ Done deleting {count} node_modules {pluralize(count, 'folder')}.")


def show_unknown_action(action: str, valid_actions: list[str]) -> None:
    err_console.print(f"Unknown action: {escape(action)}")
    err_console.print(f"Valid actions are: {', '.join(valid_actions)}")


def show_unexpected_error(error: BaseException) -> None:
    err_console.print(f"Unexpected error: {escape(str(error))}")
