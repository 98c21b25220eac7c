"""CLI entry point for api-docs-gen."""

import logging
from pathlib import Path

import click

from api_docs_gen.config import DocsConfig, load_config
from api_docs_gen.exceptions import DocsGenError
from api_docs_gen.generator.index import generate_site, write_site
from api_docs_gen.lint.fixer import extract_report_paths, fix_files
from api_docs_gen.lint.scanner import display_path, render_report, scan_directory


@click.group()
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML config file.")
@click.option("-v", "--verbose", is_flag=True, help="Log progress at INFO level.")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool):
    """API Docs Gen: render an OpenAPI spec into MDX reference pages and lint headings."""
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING, format="%(levelname)s: %(message)s")
    try:
        ctx.obj = load_config(config_path)
    except DocsGenError as e:
        raise click.ClickException(e.format_user_message()) from e


@main.command()
@click.option("--spec", "spec_path", default=None, type=click.Path(path_type=Path), help="OpenAPI YAML file.")
@click.option("-o", "--output", default=None, type=click.Path(file_okay=False, path_type=Path), help="Output directory for generated pages.")
@click.pass_obj
def generate(config: DocsConfig, spec_path: Path | None, output: Path | None):
    """Generate endpoint reference pages, the index page, and meta.json."""
    spec_path = spec_path or config.spec_path
    output = output or config.output_dir

    click.echo(f"Parsing {spec_path}...")
    try:
        files = generate_site(spec_path, config)
    except DocsGenError as e:
        raise click.ClickException(e.format_user_message()) from e

    for file_path in write_site(files, output):
        click.echo(f"  Created {file_path}")
    click.echo(f"Generated {len(files)} files in {output}")


@main.command("check-headings")
@click.option("--docs-dir", default=None, type=click.Path(file_okay=False, path_type=Path), help="Documentation root to scan.")
@click.option("--report", "report_path", default=None, type=click.Path(dir_okay=False, path_type=Path), help="Where to write the Markdown report.")
@click.pass_obj
def check_headings(config: DocsConfig, docs_dir: Path | None, report_path: Path | None):
    """Find pages whose first heading repeats the frontmatter title."""
    docs_dir = docs_dir or config.docs_dir
    report_path = report_path or config.report_path
    cwd = Path.cwd()

    click.echo("Scanning for MDX files with double header issues...\n")
    if not docs_dir.is_dir():
        click.echo(f"Docs directory {docs_dir} not found, nothing to scan.")
        return

    issues = scan_directory(docs_dir, config.doc_extension)
    if not issues:
        click.echo("No double header issues found!")
    else:
        click.echo(f"Found {len(issues)} files with double header issues:\n")
        for issue in issues:
            click.echo(display_path(issue.file_path, cwd))
            click.echo(f'   Frontmatter title: "{issue.declared_title}"')
            click.echo(f'   H2 title (line {issue.heading_line_number}): "{issue.duplicate_heading_text}"')
            click.echo(f"   Line content: {issue.line_content}")
            click.echo("")

    report_path.write_text(render_report(issues, cwd), encoding="utf-8")
    click.echo(f"Report saved to {report_path}")


@main.command("fix-headings")
@click.option("--report", "report_path", default=None, type=click.Path(dir_okay=False, path_type=Path), help="Report produced by check-headings.")
@click.pass_obj
def fix_headings(config: DocsConfig, report_path: Path | None):
    """Remove duplicate headings from the files listed in a report."""
    report_path = report_path or config.report_path
    if not report_path.is_file():
        raise click.UsageError(f"Report {report_path} not found; run check-headings first.")

    paths = [Path(p) for p in extract_report_paths(report_path.read_text(encoding="utf-8"))]
    click.echo(f"Found {len(paths)} files to fix")

    summary = fix_files(paths)
    for file_path in summary.fixed:
        click.echo(f"  Fixed {file_path}")

    click.echo(f"\nFixed {len(summary.fixed)} files")
    click.echo(f"Skipped {len(summary.skipped)} files")
