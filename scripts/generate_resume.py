#!/usr/bin/env python3
"""
Resume PDF Generation CLI

Generates ATS-friendly PDF resumes from JSON Resume files and validates JSON
resumes against the schema.

Commands:
    generate - Render a JSON resume to PDF
    validate - Check a JSON resume against the JSON Resume schema

Examples:\n

    generate_resume.py generate resume.json                         # resume.pdf beside the input

    generate_resume.py generate resume.json -t professional         # Professional template

    generate_resume.py generate resume.json --ats-mode --timestamp  # Strict ATS, timestamped name

    generate_resume.py validate resume.json                         # Schema check only
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from resume_gen.contexts.intake import ResumeLoadError
from resume_gen.contexts.intake.loader import read_resume_json, validate_resume_data
from resume_gen.contexts.rendering.logger import setup_rendering_logger
from resume_gen.contexts.rendering.pdf_generator import PDFOptions, generate_resume_pdf
from resume_gen.contexts.templating.template_registry import DEFAULT_TEMPLATE
from resume_gen.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


app = typer.Typer(
    help="Generate ATS-compliant PDF resumes from JSON Resume files",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("generate")
def generate_command(
    input_file: Annotated[
        Path,
        typer.Argument(help="JSON resume file path"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output PDF file path"),
    ] = None,
    template: Annotated[
        str,
        typer.Option(
            "--template",
            "-t",
            help="Template name: ats-optimized or professional (unknown names use ats-optimized)",
        ),
    ] = DEFAULT_TEMPLATE,
    ats_mode: Annotated[
        bool,
        typer.Option("--ats-mode", help="Use the ultra-minimal ATS template with no icons"),
    ] = False,
    timestamp: Annotated[
        bool,
        typer.Option("--timestamp", help="Add a timestamp to the output file name"),
    ] = False,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing PDF"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug output on the console"),
    ] = False,
):
    """
    Render a JSON resume to PDF.

    Examples:\n

        $ generate_resume.py generate resume.json                    # Default template

        $ generate_resume.py generate resume.json -o out/cv.pdf      # Explicit output

        $ generate_resume.py generate resume.json --force            # Overwrite existing PDF
    """
    log_dir = LOGS_PATH / f"render_{now()}"
    setup_rendering_logger(log_dir, template=template, verbose=verbose)

    typer.secho(f"\nGenerating: {input_file}", fg=typer.colors.BLUE, bold=True)
    typer.echo("")

    options = PDFOptions(
        output=output,
        template=template,
        ats_mode=ats_mode,
        timestamp=timestamp,
        force=force,
    )
    result = generate_resume_pdf(input_file, options)

    typer.echo("")
    if result.success:
        typer.secho("✓ PDF generated", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  PDF: {result.pdf_path}")
        if result.page_count is not None:
            typer.echo(f"  Pages: {result.page_count}")
        if result.validation is not None and not result.validation.is_offline_compatible:
            typer.secho(
                f"  {len(result.validation.issues)} offline compatibility issues (see log)",
                fg=typer.colors.YELLOW,
            )
    else:
        typer.secho(
            f"✗ PDF generation failed with {len(result.errors)} errors", fg=typer.colors.RED, bold=True
        )
        for error in result.errors[:10]:
            typer.secho(f"  - {error}", fg=typer.colors.RED)
        if len(result.errors) > 10:
            typer.echo(f"  ... and {len(result.errors) - 10} more")

    typer.echo(f"  Log: {log_dir / 'render.log'}")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


@app.command("validate")
def validate_command(
    input_file: Annotated[
        Path,
        typer.Argument(help="JSON resume file to validate"),
    ],
):
    """
    Validate a JSON resume against the JSON Resume schema.

    Examples:\n

        $ generate_resume.py validate resume.json
    """
    typer.secho(f"\nValidating: {input_file}", fg=typer.colors.BLUE, bold=True)

    try:
        data = read_resume_json(input_file)
    except ResumeLoadError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    report = validate_resume_data(data)

    if report.is_valid:
        typer.secho("\n✓ Resume is valid", fg=typer.colors.GREEN, bold=True)
    else:
        typer.secho(f"\n✗ {len(report.errors)} schema errors", fg=typer.colors.RED, bold=True)
        for error in report.errors:
            typer.echo(f"  - {error}")
    typer.echo("")

    raise typer.Exit(code=0 if report.is_valid else 1)


if __name__ == "__main__":
    app()
