import sys
from typing import TYPE_CHECKING, Any, Optional
from uuid import uuid4

if TYPE_CHECKING:
    from click import Group

__all__ = ("get_emysql_group", "run_cli")


def _to_values(raw_values: "tuple[str, ...]", null_marker: str) -> "list[Optional[str]]":
    return [None if value == null_marker else value for value in raw_values]


def get_emysql_group() -> "Group":
    """Get the emysql CLI group.

    Raises:
        MissingDependencyError: If `click` or `rich` is not installed.

    Returns:
        The emysql CLI group.
    """
    from emysql.exceptions import MissingDependencyError

    try:
        import rich_click as click
    except ImportError:
        try:
            import click  # type: ignore[no-redef]
        except ImportError as e:
            raise MissingDependencyError(package="click", install_package="cli") from e
    try:
        from rich import get_console
    except ImportError as e:
        raise MissingDependencyError(package="rich", install_package="cli") from e

    console = get_console()

    types_option = click.option(
        "--types", "-t", default="", show_default=False, help="One type tag per value: i, d, s or b."
    )
    null_option = click.option(
        "--null-marker", default="\\N", show_default=True, help="Value text that is bound as SQL NULL."
    )
    pretty_option = click.option("--pretty", is_flag=True, default=False, help="Re-format the query with sqlglot.")

    @click.group(name="emysql")
    def emysql_group() -> None:
        """Interpolate and run prepared MySQL statements."""

    @emysql_group.command(name="interpolate", help="Print a query with bound values substituted.")
    @click.argument("sql")
    @click.argument("values", nargs=-1)
    @types_option
    @null_option
    @pretty_option
    def interpolate(sql: str, values: "tuple[str, ...]", types: str, null_marker: str, pretty: bool) -> None:  # pyright: ignore[reportUnusedFunction]
        from emysql.core import QueryInterpolator, ValueRenderer
        from emysql.exceptions import EMysqlError
        from emysql.parameters import ParameterStore
        from emysql.utils.formatting import format_sql

        store = ParameterStore()
        try:
            store.bind(types, _to_values(values, null_marker))
            query = QueryInterpolator(renderer=ValueRenderer(warn_on_fallback=False)).interpolate(
                sql, store.to_ordered_list()
            )
            if pretty:
                query = format_sql(query)
        except EMysqlError as e:
            console.print(f"[red]{e}[/]")
            sys.exit(1)
        console.print(query, markup=False, highlight=False, soft_wrap=True)

    @emysql_group.command(name="execute", help="Run a query against a configured database and print the rows.")
    @click.option(
        "--config", help="Dotted path to a database config (e.g. 'myapp.db.emysql_config')", required=True, type=str
    )
    @click.argument("sql")
    @click.argument("values", nargs=-1)
    @types_option
    @null_option
    @pretty_option
    @click.option("--verbose", is_flag=True, default=False, help="Log the execution event to stderr.")
    @click.option("--json-logs", is_flag=True, default=False, help="With --verbose, write log lines as JSON.")
    def execute(  # pyright: ignore[reportUnusedFunction]
        config: str,
        sql: str,
        values: "tuple[str, ...]",
        types: str,
        null_marker: str,
        pretty: bool,
        verbose: bool,
        json_logs: bool,
    ) -> None:
        from rich.table import Table

        from emysql.exceptions import EMysqlError
        from emysql.observability import default_statement_observer
        from emysql.utils import module_loader
        from emysql.utils.logging import configure_logging, set_correlation_id

        try:
            emysql_config: Any = module_loader.import_string(config)
        except ImportError as e:
            console.print(f"[red]Error loading config: {e}[/]")
            sys.exit(1)

        statement_config = emysql_config.statement_config
        if verbose:
            configure_logging(level="INFO", structured=json_logs)
            set_correlation_id(uuid4().hex)
            statement_config = statement_config.replace(
                statement_observers=(*statement_config.statement_observers, default_statement_observer)
            )

        with emysql_config.provide_session(statement_config=statement_config) as driver, driver.prepare(sql) as stmt:
            try:
                stmt.bind_param(types, *_to_values(values, null_marker))
                stmt.execute()
            except EMysqlError as e:
                console.print(f"[red]{e}[/]")
                sys.exit(1)
            except Exception as e:
                console.print(f"[red]Execution failed: {e}[/]")
                console.print(stmt.full_query or stmt.query_string, markup=False, highlight=False, soft_wrap=True)
                sys.exit(1)

            console.rule("[yellow]Query[/]", align="left")
            try:
                shown = stmt.format_query() if pretty else stmt.full_query
            except EMysqlError as e:
                console.print(f"[red]{e}[/]")
                sys.exit(1)
            console.print(shown, markup=False, highlight=False, soft_wrap=True)

            columns = getattr(stmt.native, "column_names", [])
            if not columns:
                console.print(f"[green]Rows affected: {getattr(stmt.native, 'rowcount', -1)}[/]")
                return
            table = Table(*columns)
            for row in stmt.fetchall():
                cells = row.values() if isinstance(row, dict) else row
                table.add_row(*("NULL" if cell is None else str(cell) for cell in cells))
            console.print(table)

    return emysql_group


def run_cli() -> None:  # pragma: no cover
    get_emysql_group()()
