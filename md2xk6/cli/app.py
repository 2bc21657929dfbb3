"""
CLI 入口模块 - 使用 Typer 构建命令行界面

提取流程：
1. 读取 Markdown 文档（默认 README.md）
2. 解析并查找模块列表
3. 按指定格式输出
"""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from md2xk6.config import DEFAULT_SOURCE, WITH_FLAG, ExtractConfig, OutputFormat
from md2xk6.core import extract_file
from md2xk6.errors import SourceUnavailableError, TraversalError
from md2xk6.logging import configure_logging
from md2xk6.reporters import get_reporter

# 创建 Typer 应用实例
app = typer.Typer(
    name="md2xk6",
    help="md2xk6: Extract k6 extension modules from a markdown list.",
    add_completion=False,
)

# stdout 只输出结果，诊断信息走 stderr
console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        from md2xk6 import __version__
        console.print(f"[bold]md2xk6[/bold] v{__version__}")
        raise typer.Exit()


@app.command()
def run(
    source: str = typer.Argument(
        DEFAULT_SOURCE,
        help="Markdown file to read (use - for standard input)",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.ARGS,
        "--format",
        "-f",
        envvar="MD2XK6_FORMAT",
        case_sensitive=False,
        help="Output format: args (default), lines or json",
    ),
    encoding: str = typer.Option(
        "utf-8",
        "--encoding",
        help="Text encoding of the markdown file",
    ),
    with_flag: str = typer.Option(
        WITH_FLAG,
        "--with-flag",
        envvar="MD2XK6_WITH_FLAG",
        help="Flag written before each module in args format",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        envvar="MD2XK6_VERBOSE",
        help="Log list and link decisions to stderr",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """
    Print the modules of the first list whose items each hold exactly one link.
    
    Examples:
        md2xk6
        md2xk6 docs/extensions.md
        xk6 build $(md2xk6)
        md2xk6 --format json README.md
    """
    config = ExtractConfig(
        source=source,
        encoding=encoding,
        output_format=output_format,
        with_flag=with_flag,
        verbose=verbose,
    )
    
    configure_logging(verbose=config.verbose)
    
    try:
        modules = extract_file(config.source, config)
    except SourceUnavailableError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except TraversalError as e:
        err_console.print(f"[red]Error:[/red] Failed to walk document: {escape(str(e))}")
        raise typer.Exit(1)
    
    get_reporter(config.output_format, config.with_flag).report(modules)


if __name__ == "__main__":
    app()
