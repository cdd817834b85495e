import json
import logging
import os

import click

from kdp_cover.config.print_spec import load_print_spec
from kdp_cover.config.sizes import BindingType, PaperColor, TrimSize
from kdp_cover.cover.cover_renderer import generate_cover, sanitize_filename
from kdp_cover.cover.cover_template import render_template_png
from kdp_cover.cover.cover_validator import validate_cover
from kdp_cover.cover.geometry import CoverSpec, SpineGeometryCalculator
from kdp_cover.errors import CoverError


@click.command(help="Compute KDP cover geometry, generate a cover PDF, or validate an existing cover.")
@click.option("--trim", type=click.Choice([t.value for t in TrimSize]), default="6x9", show_default=True, help="Trim size key")
@click.option("--pages", type=click.IntRange(min=1), default=120, show_default=True, help="Interior page count used to compute spine width")
@click.option("--paper", type=click.Choice([p.value for p in PaperColor], case_sensitive=False), default="white", show_default=True, help="Interior paper color")
@click.option("--binding", type=click.Choice([b.value for b in BindingType], case_sensitive=False), default="paperback", show_default=True, help="Binding type")
@click.option("--print-spec", "print_spec_path", type=click.Path(exists=True, dir_okay=False), default=None, help="JSON file overriding bleed, margins and paper thickness")
@click.option("--spine-chart", "spine_chart", is_flag=True, default=False, help="Print the spine width chart for white and cream paper and exit")
@click.option("--geometry", "show_geometry", is_flag=True, default=False, help="Print cover geometry and safe zones as JSON and exit")
@click.option("--make-cover", "make_cover", is_flag=True, default=False, help="Generate a cover PDF")
@click.option("--out", "out_path", type=str, default=None, help="Output cover PDF path (default: outputs/<title>.pdf, or outputs/cover.pdf without a title)")
@click.option("--title", type=str, default="", show_default=True, help="Front cover and spine title")
@click.option("--subtitle", type=str, default="", show_default=True, help="Front cover subtitle")
@click.option("--author", type=str, default="", show_default=True, help="Front cover author")
@click.option("--back-text", "back_text", type=str, default="", show_default=True, help="Back cover description")
@click.option("--author-bio", "author_bio", type=str, default="", show_default=True, help="Back cover author bio")
@click.option("--bg-color", "bg_color", type=str, default="#FFFFFF", show_default=True, help="Background color (hex)")
@click.option("--text-color", "text_color", type=str, default="#000000", show_default=True, help="Text color (hex)")
@click.option("--guides", is_flag=True, default=False, help="Draw trim, fold and safe-zone guides (not for print)")
@click.option("--template-png", "template_png", type=str, default=None, help="Also write a 300 DPI guide template PNG to this path")
@click.option("--validate-cover-path", "validate_cover_path", type=str, default=None, help="Validate the given cover PDF against --trim/--pages/--paper/--binding and exit")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def main(trim: str, pages: int, paper: str, binding: str, print_spec_path: str | None, spine_chart: bool, show_geometry: bool,
         make_cover: bool, out_path: str | None, title: str, subtitle: str, author: str, back_text: str, author_bio: str,
         bg_color: str, text_color: str, guides: bool, template_png: str | None, validate_cover_path: str | None, verbose: bool):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        print_spec = load_print_spec(print_spec_path) if print_spec_path else None
        calculator = SpineGeometryCalculator(print_spec)

        if spine_chart:
            chart = calculator.spine_width_chart(binding_type=binding.lower())
            click.echo(f"Spine width chart ({binding.lower()}, inches)")
            click.echo(f"{'pages':>6}  {'white':>8}  {'cream':>8}")
            for count, widths in chart.items():
                click.echo(f"{count:>6}  {widths['white']:>8.4f}  {widths['cream']:>8.4f}")
            return

        spec = CoverSpec(page_count=pages, trim_size=trim, paper_color=paper.lower(), binding_type=binding.lower())

        if validate_cover_path:
            report = validate_cover(validate_cover_path, spec, calculator)
            click.echo(f"Cover validation for {validate_cover_path}")
            click.echo(f"Expected size: {report.expected_width_pt:.2f} x {report.expected_height_pt:.2f} pt (spine {report.expected_spine_pt:.2f} pt)")
            click.echo(f"Actual size:   {report.width_pt:.2f} x {report.height_pt:.2f} pt")
            if not report.issues:
                click.echo("✅ No issues found.")
            else:
                for iss in report.issues:
                    click.echo(f"{iss.level.upper()}: {iss.message}")
            if not report.ok:
                raise SystemExit(1)
            return

        if show_geometry:
            layout = calculator.layout(spec)
            click.echo(json.dumps(layout.to_dict(), indent=2))
            return

        if make_cover:
            if not out_path:
                out_path = os.path.join("outputs", f"{sanitize_filename(title) or 'cover'}.pdf")
            out_dir = os.path.dirname(out_path)
            if out_dir:
                os.makedirs(out_dir, exist_ok=True)
            layout = generate_cover(
                spec,
                out_path,
                title=title,
                subtitle=subtitle,
                author=author,
                back_text=back_text,
                author_bio=author_bio,
                bg_color=bg_color,
                text_color=text_color,
                draw_guides=guides,
                calculator=calculator,
            )
            g = layout.geometry
            click.echo(f"✅ Generated cover {out_path} for trim {trim}, pages {pages}, paper {paper}, {binding}")
            click.echo(f"📐 {g.total_width:.4f} x {g.total_height:.4f} in, spine {g.spine_width:.4f} in")
            if title and not layout.spine_text_allowed:
                click.echo("⚠️  Spine too narrow for text; spine left blank.")
            if template_png:
                px_w, px_h = render_template_png(layout, template_png)
                click.echo(f"✅ Generated template {template_png} ({px_w}x{px_h} px)")
            return

        # Default: short summary
        layout = calculator.layout(spec)
        g = layout.geometry
        click.echo(f"Trim {trim}, {pages} pages, {paper} {binding}")
        click.echo(f"Spine width: {g.spine_width:.4f} in")
        click.echo(f"Full cover:  {g.total_width:.4f} x {g.total_height:.4f} in (bleed {g.bleed} in)")
    except CoverError as e:
        click.echo(f"❌ {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
