from __future__ import annotations

import importlib.util
import logging
import pathlib
from dataclasses import dataclass
from types import ModuleType
import sys
import traceback
from typing import Callable, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from scadgen._config import RenderSettings, default_config_text, load_render_settings
from scadgen.io.scad import WriteError, write_scad
from scadgen.models import MODELS, get_model
from scadgen.scene import Scene, as_scene
from scadgen.validation import InvalidParameter

console = Console()
app = typer.Typer(help="Compose CSG scenes and write them as OpenSCAD files.")
generate_app = typer.Typer(help="Write one of the bundled example models.")
app.add_typer(generate_app, name="generate")

logger = logging.getLogger("scadgen")


@dataclass(frozen=True)
class SettingsOptions:
    config: pathlib.Path | None
    fa: float | None
    fs: float | None
    fn: int | None


def _configure_logging(verbose: bool) -> None:
    handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def _fail(title: str, exc: BaseException) -> NoReturn:
    console.print(Panel.fit(str(exc), title=title, style="red"))
    raise typer.Exit(code=1)


def _resolve_settings(opts: SettingsOptions) -> RenderSettings:
    try:
        settings = load_render_settings(opts.config).with_overrides(fa=opts.fa, fs=opts.fs, fn=opts.fn)
    except InvalidParameter as exc:
        _fail("Invalid render settings", exc)
    logger.debug("Render settings: $fa=%s $fs=%s $fn=%s", settings.fa, settings.fs, settings.fn)
    return settings


def _write_scene(scene: Scene, output: pathlib.Path, title: str) -> None:
    try:
        written = write_scad(scene, output)
    except WriteError as exc:
        _fail("Write failed", exc)

    statements = sum(1 for _ in scene.root.walk())
    settings = scene.settings
    console.print(
        Panel(
            f"Wrote {statements} statements to [green]{written}[/green]. "
            f"$fa={settings.fa:g}, $fs={settings.fs:g}, $fn={settings.fn}.",
            title=title,
            border_style="green",
        )
    )


def _load_module(path: pathlib.Path) -> ModuleType:
    module_name = "scadgen_user_model"
    if module_name in sys.modules:
        del sys.modules[module_name]

    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise typer.BadParameter(f"Unable to import model at {path}")

    module = importlib.util.module_from_spec(spec)
    # Register module so features relying on sys.modules (e.g., dataclasses) work.
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


class ModelBuildError(RuntimeError):
    """Raised when a model module cannot provide a usable scene."""


def _format_exception(exc: BaseException) -> str:
    return "".join(traceback.format_exception(exc))


def _scene_factory_from_module(model_path: pathlib.Path) -> Callable[[], object]:
    def factory() -> object:
        module = _load_module(model_path)
        builder = getattr(module, "build", None)
        if builder is None or not callable(builder):
            raise ModelBuildError(f"{model_path} must define a callable build() function.")
        return builder()

    return factory


def _next_available_path(path: pathlib.Path) -> pathlib.Path:
    """Return a non-conflicting path by appending ' (n)' before the suffix."""

    if not path.exists():
        return path

    parent = path.parent
    stem = path.stem
    suffix = path.suffix
    n = 1
    while True:
        candidate = parent / f"{stem} ({n}){suffix}"
        if not candidate.exists():
            return candidate
        n += 1


def _generate(name: str, output: pathlib.Path | None, opts: SettingsOptions) -> None:
    entry = get_model(name)
    settings = _resolve_settings(opts)
    try:
        scene = Scene(root=entry.build(), settings=settings)
    except InvalidParameter as exc:
        _fail(f"Building '{name}' failed", exc)
    _write_scene(scene, output or pathlib.Path(entry.filename), title="Generate complete")


def _output_option() -> typer.models.OptionInfo:
    return typer.Option(
        None,
        "--output",
        "-o",
        help="Destination .scad file (defaults to the model's file name in the current directory).",
    )


def _config_option() -> typer.models.OptionInfo:
    return typer.Option(
        None,
        "--config",
        exists=True,
        dir_okay=False,
        help="JSON file with fa/fs/fn render settings.",
    )


def _fa_option() -> typer.models.OptionInfo:
    return typer.Option(None, "--fa", help="Global angular facet size in degrees ($fa).")


def _fs_option() -> typer.models.OptionInfo:
    return typer.Option(None, "--fs", help="Global linear facet size ($fs).")


def _fn_option() -> typer.models.OptionInfo:
    return typer.Option(None, "--fn", help="Global segment count ($fn); 0 lets $fa/$fs decide.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    _configure_logging(verbose)


@generate_app.command("default")
def generate_default(
    output: pathlib.Path | None = _output_option(),
    config: pathlib.Path | None = _config_option(),
    fa: float | None = _fa_option(),
    fs: float | None = _fs_option(),
    fn: int | None = _fn_option(),
) -> None:
    """
    Build the default (car) scene and write it to default.scad.
    """

    _generate("default", output, SettingsOptions(config=config, fa=fa, fs=fs, fn=fn))


@generate_app.command("car")
def generate_car(
    output: pathlib.Path | None = _output_option(),
    config: pathlib.Path | None = _config_option(),
    fa: float | None = _fa_option(),
    fs: float | None = _fs_option(),
    fn: int | None = _fn_option(),
) -> None:
    """
    Build the car scene and write it to car.scad.
    """

    _generate("car", output, SettingsOptions(config=config, fa=fa, fs=fs, fn=fn))


@generate_app.command("house")
def generate_house(
    output: pathlib.Path | None = _output_option(),
    config: pathlib.Path | None = _config_option(),
    fa: float | None = _fa_option(),
    fs: float | None = _fs_option(),
    fn: int | None = _fn_option(),
) -> None:
    """
    Build the house scene and write it to house.scad.
    """

    _generate("house", output, SettingsOptions(config=config, fa=fa, fs=fs, fn=fn))


@generate_app.command("difference")
def generate_difference(
    output: pathlib.Path | None = _output_option(),
    config: pathlib.Path | None = _config_option(),
    fa: float | None = _fa_option(),
    fs: float | None = _fs_option(),
    fn: int | None = _fn_option(),
) -> None:
    """
    Build the cube-minus-sphere scene and write it to difference.scad.
    """

    _generate("difference", output, SettingsOptions(config=config, fa=fa, fs=fs, fn=fn))


@app.command()
def export(
    model: pathlib.Path = typer.Argument(..., help="Python module defining build()."),
    output: pathlib.Path = typer.Option(
        pathlib.Path("model.scad"),
        "--output",
        "-o",
        help="Path to the .scad file that will be produced.",
    ),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing file."),
    config: pathlib.Path | None = _config_option(),
    fa: float | None = _fa_option(),
    fs: float | None = _fs_option(),
    fn: int | None = _fn_option(),
) -> None:
    """
    Load a model module, call its build(), and write the scene as OpenSCAD.
    """

    if not model.exists():
        raise typer.BadParameter(f"Model path {model} does not exist.")

    final_output = output
    if output.exists():
        if not overwrite:
            final_output = _next_available_path(output)
            if final_output != output:
                console.print(f"[yellow]Output {output} exists; writing to {final_output} instead.[/yellow]")

    settings = _resolve_settings(SettingsOptions(config=config, fa=fa, fs=fs, fn=fn))
    scene_factory = _scene_factory_from_module(model)
    try:
        built = scene_factory()
    except ModelBuildError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except InvalidParameter as exc:
        _fail("Model build failed", exc)
    except Exception as exc:
        logger.debug("Model traceback:\n%s", _format_exception(exc))
        raise typer.BadParameter(f"Model execution failed: {exc}") from exc

    try:
        scene = as_scene(built)
    except InvalidParameter as exc:
        raise typer.BadParameter(str(exc)) from exc

    # A Scene returned by build() keeps its own settings unless overridden on the command line.
    if not isinstance(built, Scene) or any(v is not None for v in (config, fa, fs, fn)):
        scene = scene.with_settings(settings)

    _write_scene(scene, final_output, title="Export complete")


@app.command("models")
def list_models() -> None:
    """
    List the bundled models and the file each one writes.
    """

    table = Table(title="Bundled models")
    table.add_column("Name", style="cyan")
    table.add_column("Output")
    table.add_column("Description")
    for entry in MODELS.values():
        table.add_row(entry.name, entry.filename, entry.description)
    console.print(table)


@app.command("config")
def show_config() -> None:
    """
    Print a default render-settings file suitable for --config.
    """

    typer.echo(default_config_text(), nl=False)
