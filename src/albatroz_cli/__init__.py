#!/usr/bin/env python3
# /// script
# requires-python = ">=3.11"
# dependencies = [
#     "typer",
#     "rich",
#     "readchar",
#     "httpx",
#     "truststore",
# ]
# ///
"""
Albatroz CLI - Add Albatroz UI components to Expo projects

Usage:
    uvx albatroz-cli init
    uvx albatroz-cli add <component>

Or install globally:
    uv tool install albatroz-cli
    albatroz init
    albatroz add alert
"""

import json
import os
import shutil
import subprocess
import sys
from pathlib import Path
from types import MappingProxyType
from typing import Optional
from urllib.parse import urlparse

import typer
import httpx
from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.live import Live
from rich.align import Align
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree
from typer.core import TyperGroup

# For cross-platform keyboard input
import readchar
import ssl
import truststore

__version__ = "1.0.0"

ssl_context = truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)


def _github_token(cli_token: str | None = None) -> str | None:
    """Return sanitized GitHub token (cli arg takes precedence) or None."""
    return ((cli_token or os.getenv("GH_TOKEN") or os.getenv("GITHUB_TOKEN") or "").strip()) or None


def _github_auth_headers(cli_token: str | None = None) -> dict:
    """Return Authorization header dict only when a non-empty token exists."""
    token = _github_token(cli_token)
    return {"Authorization": f"Bearer {token}"} if token else {}


# Constants
CONFIG_FILE = "albatroz.json"
MANIFEST_FILE = "package.json"
FRAMEWORK_DEPENDENCY = "expo"
ICON_LIBRARY = "lucide-react-native"
COMPONENTS_DIR = Path("src") / "components" / "ui"
CREATE_PROJECT_COMMAND = "npx create-expo-app@latest"
DEFAULT_BASE_URL = "https://raw.githubusercontent.com/eugustavo/albatroz/refs/heads/main/src/components"
DOWNLOAD_TIMEOUT = 30

DEFAULT_CONFIG = MappingProxyType({
    "baseUrl": DEFAULT_BASE_URL,
    "dependencies": MappingProxyType({
        FRAMEWORK_DEPENDENCY: False,
        ICON_LIBRARY: False,
    }),
})

AVAILABLE_COMPONENTS = tuple(sorted(("Alert", "Avatar", "Card", "Toast"), key=str.lower))
_COMPONENT_INDEX = {name.lower(): name for name in AVAILABLE_COMPONENTS}

# Package manager -> install command
PACKAGE_MANAGER_CHOICES = {
    "npm": "npm install",
    "yarn": "yarn add",
    "pnpm": "pnpm add",
}
LOCKFILE_MARKERS = {
    "pnpm-lock.yaml": "pnpm",
    "yarn.lock": "yarn",
    "package-lock.json": "npm",
}

# ASCII Art Banner
BANNER = """
 █████╗ ██╗     ██████╗  █████╗ ████████╗██████╗  ██████╗ ███████╗
██╔══██╗██║     ██╔══██╗██╔══██╗╚══██╔══╝██╔══██╗██╔═══██╗╚══███╔╝
███████║██║     ██████╔╝███████║   ██║   ██████╔╝██║   ██║  ███╔╝
██╔══██║██║     ██╔══██╗██╔══██║   ██║   ██╔══██╗██║   ██║ ███╔╝
██║  ██║███████╗██████╔╝██║  ██║   ██║   ██║  ██║╚██████╔╝███████╗
╚═╝  ╚═╝╚══════╝╚═════╝ ╚═╝  ╚═╝   ╚═╝   ╚═╝  ╚═╝ ╚═════╝ ╚══════╝
"""

TAGLINE = "Albatroz UI - Components for Expo, copied into your project"


class ComponentNotFoundError(RuntimeError):
    """The component is in the catalog but the repository has no file for it."""


class ComponentNotAvailableError(ValueError):
    """The requested name is not part of the component catalog."""


class InstallError(RuntimeError):
    """Installing a dependency through the package manager failed."""


class StepTracker:
    """Track and render hierarchical steps as a tree.
    Supports live auto-refresh via an attached refresh callback.
    """
    def __init__(self, title: str):
        self.title = title
        self.steps = []  # list of dicts: {key, label, status, detail}
        self._refresh_cb = None

    def attach_refresh(self, cb):
        self._refresh_cb = cb

    def add(self, key: str, label: str):
        if key not in [s["key"] for s in self.steps]:
            self.steps.append({"key": key, "label": label, "status": "pending", "detail": ""})
            self._maybe_refresh()

    def start(self, key: str, detail: str = ""):
        self._update(key, status="running", detail=detail)

    def complete(self, key: str, detail: str = ""):
        self._update(key, status="done", detail=detail)

    def error(self, key: str, detail: str = ""):
        self._update(key, status="error", detail=detail)

    def skip(self, key: str, detail: str = ""):
        self._update(key, status="skipped", detail=detail)

    def _update(self, key: str, status: str, detail: str):
        for s in self.steps:
            if s["key"] == key:
                s["status"] = status
                if detail:
                    s["detail"] = detail
                self._maybe_refresh()
                return
        self.steps.append({"key": key, "label": key, "status": status, "detail": detail})
        self._maybe_refresh()

    def _maybe_refresh(self):
        if self._refresh_cb:
            try:
                self._refresh_cb()
            except Exception:
                pass

    def render(self):
        tree = Tree(f"[cyan]{self.title}[/cyan]", guide_style="grey50")
        symbols = {
            "done": "[green]●[/green]",
            "pending": "[green dim]○[/green dim]",
            "running": "[cyan]○[/cyan]",
            "error": "[red]●[/red]",
            "skipped": "[yellow]○[/yellow]",
        }
        for step in self.steps:
            label = step["label"]
            detail_text = escape(step["detail"].strip()) if step["detail"] else ""
            status = step["status"]
            symbol = symbols.get(status, " ")

            if status == "pending":
                suffix = f" ({detail_text})" if detail_text else ""
                line = f"{symbol} [bright_black]{label}{suffix}[/bright_black]"
            elif detail_text:
                line = f"{symbol} [white]{label}[/white] [bright_black]({detail_text})[/bright_black]"
            else:
                line = f"{symbol} [white]{label}[/white]"

            tree.add(line)
        return tree


console = Console()


def get_key():
    """Get a single keypress in a cross-platform way using readchar."""
    key = readchar.readkey()

    if key == readchar.key.UP:
        return 'up'
    if key == readchar.key.DOWN:
        return 'down'
    if key == readchar.key.ENTER:
        return 'enter'
    if key == readchar.key.ESC:
        return 'escape'
    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt

    return key


def select_with_arrows(options: dict, prompt_text: str = "Select an option", default_key: str = None) -> str:
    """
    Interactive selection using arrow keys with Rich Live display.

    Args:
        options: Dict with keys as option keys and values as descriptions
        prompt_text: Text to show above the options
        default_key: Default option key to start with

    Returns:
        Selected option key
    """
    option_keys = list(options.keys())
    selected_index = option_keys.index(default_key) if default_key in option_keys else 0
    selected_key = None

    def create_selection_panel():
        table = Table.grid(padding=(0, 2))
        table.add_column(style="cyan", justify="left", width=3)
        table.add_column(style="white", justify="left")

        for i, key in enumerate(option_keys):
            marker = "▶" if i == selected_index else " "
            table.add_row(marker, f"[cyan]{key}[/cyan] [dim]({options[key]})[/dim]")

        table.add_row("", "")
        table.add_row("", "[dim]Use ↑/↓ to navigate, Enter to select, Esc to cancel[/dim]")

        return Panel(
            table,
            title=f"[bold]{prompt_text}[/bold]",
            border_style="cyan",
            padding=(1, 2)
        )

    console.print()

    with Live(create_selection_panel(), console=console, transient=True, auto_refresh=False) as live:
        while True:
            try:
                key = get_key()
            except KeyboardInterrupt:
                console.print("\n[yellow]Selection cancelled[/yellow]")
                raise typer.Exit(1)

            if key == 'up':
                selected_index = (selected_index - 1) % len(option_keys)
            elif key == 'down':
                selected_index = (selected_index + 1) % len(option_keys)
            elif key == 'enter':
                selected_key = option_keys[selected_index]
                break
            elif key == 'escape':
                console.print("\n[yellow]Selection cancelled[/yellow]")
                raise typer.Exit(1)

            live.update(create_selection_panel(), refresh=True)

    return selected_key


def show_invalid_command(name: str):
    console.print(f"\n[red]Error:[/red] Invalid command '{escape(name)}'")
    console.print("\n[bright_black]Available commands:[/bright_black]")
    for command in ("init", "add [component]", "check"):
        console.print(f"[yellow]  - {escape(command)}[/yellow]")


class BannerGroup(TyperGroup):
    """Custom group that shows banner before help and rejects unknown commands with exit code 1."""

    def format_help(self, ctx, formatter):
        show_banner()
        super().format_help(ctx, formatter)

    def resolve_command(self, ctx, args):
        cmd_name = args[0] if args else ""
        if (
            cmd_name
            and not cmd_name.startswith("-")
            and not ctx.resilient_parsing
            and self.get_command(ctx, cmd_name) is None
        ):
            show_invalid_command(cmd_name)
            ctx.exit(1)
        return super().resolve_command(ctx, args)


app = typer.Typer(
    name="albatroz",
    help="Add Albatroz UI components to your Expo project",
    add_completion=False,
    invoke_without_command=True,
    cls=BannerGroup,
)


def show_banner():
    """Display the ASCII art banner."""
    banner_lines = BANNER.strip().split('\n')
    colors = ["bright_blue", "blue", "cyan", "bright_cyan", "white", "bright_white"]

    styled_banner = Text()
    for i, line in enumerate(banner_lines):
        styled_banner.append(line + "\n", style=colors[i % len(colors)])

    console.print(Align.center(styled_banner))
    console.print(Align.center(Text(TAGLINE, style="italic bright_yellow")))
    console.print()


def _version_callback(value: bool):
    if value:
        console.print(f"albatroz {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-V", callback=_version_callback, is_eager=True, help="Show the version and exit"),
):
    """Show banner when no subcommand is provided."""
    if ctx.invoked_subcommand is None and "--help" not in sys.argv and "-h" not in sys.argv:
        show_banner()
        console.print(Align.center("[dim]Run 'albatroz --help' for usage information[/dim]"))
        console.print()


def _debug_panel(pairs: list[tuple[str, str]]) -> Panel:
    env_pairs = [
        ("Python", sys.version.split()[0]),
        ("Platform", sys.platform),
        ("CWD", str(Path.cwd())),
        *pairs,
    ]
    label_width = max(len(k) for k, _ in env_pairs)
    lines = [f"{k.ljust(label_width)} → [bright_black]{escape(v)}[/bright_black]" for k, v in env_pairs]
    return Panel("\n".join(lines), title="Debug Environment", border_style="magenta")


def run_command(cmd: list[str], cwd: Path | None = None) -> str:
    """Run an external command with its output captured, raising CalledProcessError on failure."""
    result = subprocess.run(cmd, check=True, capture_output=True, text=True, cwd=cwd)
    return result.stdout.strip()


def find_tool(tool: str) -> str | None:
    """Return the resolved executable path for a tool on PATH."""
    return shutil.which(tool)


def check_tool(tool: str) -> bool:
    """Check if a tool is installed."""
    return find_tool(tool) is not None


def check_tool_for_tracker(tool: str, tracker: StepTracker) -> bool:
    """Check if a tool is installed and update tracker."""
    if check_tool(tool):
        tracker.complete(tool, "available")
        return True
    tracker.error(tool, "not found")
    return False


# Host project manifest

def load_manifest(project_path: Path) -> dict:
    """Parse the host project's package.json."""
    with (project_path / MANIFEST_FILE).open("r", encoding="utf-8") as fh:
        manifest = json.load(fh)
    if not isinstance(manifest, dict):
        raise ValueError(f"{MANIFEST_FILE} must contain a JSON object")
    return manifest


def manifest_dependencies(manifest: dict) -> dict:
    """Merge runtime and development dependencies; dev entries win on conflicts."""
    merged = {}
    for section in ("dependencies", "devDependencies"):
        entries = manifest.get(section) or {}
        if isinstance(entries, dict):
            merged.update(entries)
    return merged


def has_dependency(manifest: dict | None, name: str) -> bool:
    if not manifest:
        return False
    return bool(manifest_dependencies(manifest).get(name))


def check_expo_project(project_path: Path) -> dict:
    """Exit with code 1 unless project_path holds a package.json that depends on expo.

    Returns the parsed manifest so callers don't read it twice.
    """
    try:
        manifest = load_manifest(project_path)
    except (OSError, ValueError):
        console.print(f"\n[red]Error:[/red] Could not find {MANIFEST_FILE}")
        console.print("\n[yellow]Please make sure you are in the root of your project.[/yellow]")
        raise typer.Exit(1)

    if not has_dependency(manifest, FRAMEWORK_DEPENDENCY):
        console.print("\n[red]Error:[/red] This is not an Expo project")
        console.print("\n[yellow]At this moment, we only support Expo projects.[/yellow]")
        console.print("\n[bright_black]Please create a new project using:[/bright_black]")
        console.print(f"\n[blue]  {CREATE_PROJECT_COMMAND}[/blue]")
        raise typer.Exit(1)

    return manifest


# Config store

def normalize_base_url(url: str) -> str:
    cleaned = (url or "").strip().rstrip("/")
    parsed = urlparse(cleaned)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Invalid base URL '{url}': expected an http:// or https:// URL")
    return cleaned


def new_config(base_url: str | None = None) -> dict:
    """Return a fresh, mutable copy of DEFAULT_CONFIG."""
    return {
        "baseUrl": normalize_base_url(base_url) if base_url else DEFAULT_CONFIG["baseUrl"],
        "dependencies": dict(DEFAULT_CONFIG["dependencies"]),
    }


def config_exists(project_path: Path) -> bool:
    return (project_path / CONFIG_FILE).is_file()


def read_config(project_path: Path) -> dict:
    with (project_path / CONFIG_FILE).open("r", encoding="utf-8") as fh:
        config = json.load(fh)
    if not isinstance(config, dict):
        raise ValueError(f"{CONFIG_FILE} must contain a JSON object")

    base_url = config.get("baseUrl")
    if not isinstance(base_url, str):
        raise ValueError(f"{CONFIG_FILE} baseUrl must be a string")
    config["baseUrl"] = normalize_base_url(base_url)
    dependencies = config.get("dependencies")
    config["dependencies"] = {
        **DEFAULT_CONFIG["dependencies"],
        **(dependencies if isinstance(dependencies, dict) else {}),
    }
    return config


def save_config(project_path: Path, config: dict) -> None:
    with (project_path / CONFIG_FILE).open("w", encoding="utf-8") as fh:
        json.dump(config, fh, indent=2)
        fh.write("\n")


# Dependency installer

def detect_package_manager(project_path: Path) -> str:
    """Guess the package manager from lockfiles, defaulting to npm."""
    for lockfile, manager in LOCKFILE_MARKERS.items():
        if (project_path / lockfile).exists():
            return manager
    return "npm"


def _validate_package_manager(package_manager: str | None):
    if package_manager and package_manager not in PACKAGE_MANAGER_CHOICES:
        console.print(f"[red]Error:[/red] Invalid package manager '{escape(package_manager)}'. Choose from: {', '.join(PACKAGE_MANAGER_CHOICES.keys())}")
        raise typer.Exit(1)


def choose_package_manager(project_path: Path, requested: str | None = None) -> str:
    if requested:
        _validate_package_manager(requested)
        return requested

    default_manager = detect_package_manager(project_path)
    # Only prompt when someone can answer
    if sys.stdin.isatty():
        return select_with_arrows(
            PACKAGE_MANAGER_CHOICES,
            "Which package manager do you want to use?",
            default_manager,
        )
    return default_manager


def install_dependency(package_manager: str, package: str, project_path: Path) -> None:
    """Install package with the given package manager, output captured."""
    executable = find_tool(package_manager)
    if executable is None:
        raise InstallError(f"{package_manager} was not found on PATH")

    subcommand = PACKAGE_MANAGER_CHOICES[package_manager].split()[1:]
    try:
        run_command([executable, *subcommand, package], cwd=project_path)
    except subprocess.CalledProcessError as e:
        message = f"{' '.join([package_manager, *subcommand, package])} exited with code {e.returncode}"
        detail = (e.stderr or e.stdout or "").strip()
        if detail:
            message += f"\n{detail}"
        raise InstallError(message) from e


def initialize_project(
    project_path: Path,
    *,
    package_manager: str | None = None,
    base_url: str | None = None,
    debug: bool = False,
) -> bool:
    """Validate the project, install the icon library if missing and write albatroz.json.

    Returns False when installation or saving fails. Validation failures exit the
    process instead.
    """
    console.print("\n[blue]Initializing Albatroz UI...[/blue]")

    manifest = check_expo_project(project_path)

    previous = None
    if config_exists(project_path):
        try:
            previous = read_config(project_path)
        except (OSError, ValueError) as e:
            console.print(f"[yellow]Warning:[/yellow] ignoring unreadable {CONFIG_FILE} ({escape(str(e))})")

    config = new_config(base_url or (previous["baseUrl"] if previous else None))
    dependencies = config["dependencies"]
    dependencies[FRAMEWORK_DEPENDENCY] = has_dependency(manifest, FRAMEWORK_DEPENDENCY)
    dependencies[ICON_LIBRARY] = has_dependency(manifest, ICON_LIBRARY) or bool(
        previous and previous["dependencies"].get(ICON_LIBRARY)
    )

    selected_manager = None
    if not dependencies[ICON_LIBRARY]:
        selected_manager = choose_package_manager(project_path, package_manager)

    tracker = StepTracker("Initialize Albatroz UI")
    tracker.add("project", "Check Expo project")
    tracker.complete("project", "expo found")
    tracker.add("detect", "Detect dependencies")
    tracker.complete("detect", f"{ICON_LIBRARY} {'present' if dependencies[ICON_LIBRARY] else 'missing'}")
    for key, label in [
        ("install", f"Install {ICON_LIBRARY}"),
        ("config", f"Write {CONFIG_FILE}"),
        ("final", "Finalize"),
    ]:
        tracker.add(key, label)

    failure = None
    with Live(tracker.render(), console=console, refresh_per_second=8, transient=True) as live:
        tracker.attach_refresh(lambda: live.update(tracker.render()))
        step = "install"
        try:
            if dependencies[ICON_LIBRARY]:
                tracker.skip("install", "already installed")
            else:
                tracker.start("install", selected_manager)
                install_dependency(selected_manager, ICON_LIBRARY, project_path)
                dependencies[ICON_LIBRARY] = True
                tracker.complete("install", f"via {selected_manager}")

            step = "config"
            tracker.start("config")
            save_config(project_path, config)
            tracker.complete("config", "saved")
            tracker.complete("final", "project ready")
        except Exception as e:
            failure = e
            tracker.error(step, str(e).splitlines()[0] if str(e) else type(e).__name__)
            tracker.error("final", "failed")

    console.print(tracker.render())

    if failure is not None:
        console.print("\n[red]Failed to initialize project[/red]")
        console.print(Panel(escape(str(failure)) or type(failure).__name__, title="Error Details", border_style="red"))
        if debug:
            console.print(_debug_panel([("Package manager", selected_manager or "-")]))
        return False

    console.print("\n[bold green]Project initialized successfully![/bold green]")
    return True


# Component fetcher/writer

def resolve_component(name: str | None) -> str | None:
    """Map a user supplied name to its catalog display name, case-insensitively."""
    if not name:
        return None
    return _COMPONENT_INDEX.get(name.lower())


def component_url(name: str, base_url: str) -> str:
    return f"{base_url.rstrip('/')}/{name.lower()}.tsx"


def print_available_components():
    console.print("\n[blue]Available components:[/blue]")
    for name in AVAILABLE_COMPONENTS:
        console.print(f"[yellow]  - {name}[/yellow]")


def download_component(name: str, base_url: str, *, client: httpx.Client, github_token: str = None) -> bytes:
    """Fetch the component source, raising ComponentNotFoundError on 404."""
    response = client.get(
        component_url(name, base_url),
        timeout=DOWNLOAD_TIMEOUT,
        follow_redirects=True,
        headers=_github_auth_headers(github_token),
    )
    if response.status_code == 404:
        raise ComponentNotFoundError("Component not found in repository")
    response.raise_for_status()
    return response.content


def write_component(project_path: Path, display_name: str, content: bytes) -> Path:
    """Write content to src/components/ui/<display_name>.tsx. Existing files are overwritten."""
    target_dir = project_path / COMPONENTS_DIR
    target_dir.mkdir(parents=True, exist_ok=True)
    target = target_dir / f"{display_name}.tsx"
    target.write_bytes(content)
    return target


def add_component(
    project_path: Path,
    name: str,
    config: dict,
    *,
    client: httpx.Client,
    github_token: str = None,
    tracker: StepTracker | None = None,
) -> Path:
    """Download a catalog component and write it into the project."""
    display_name = resolve_component(name)
    if display_name is None:
        raise ComponentNotAvailableError(f"Component '{name}' is not available")

    url = component_url(display_name, config["baseUrl"])
    if tracker:
        tracker.start("download", url)
    try:
        content = download_component(display_name, config["baseUrl"], client=client, github_token=github_token)
    except Exception as e:
        if tracker:
            tracker.error("download", str(e))
        raise
    if tracker:
        tracker.complete("download", f"{len(content):,} bytes")
        tracker.start("write")

    try:
        target = write_component(project_path, display_name, content)
    except OSError as e:
        if tracker:
            tracker.error("write", str(e))
        raise
    if tracker:
        tracker.complete("write", target.relative_to(project_path).as_posix())
    return target


def _build_client(skip_tls: bool = False) -> httpx.Client:
    return httpx.Client(verify=ssl_context if not skip_tls else False)


@app.command()
def init(
    package_manager: str = typer.Option(None, "--package-manager", "-p", help="Package manager used to install dependencies: npm, yarn or pnpm"),
    base_url: str = typer.Option(None, "--base-url", help="Base URL components are downloaded from"),
    debug: bool = typer.Option(False, "--debug", help="Show verbose diagnostic output on failures"),
):
    """
    Initialize Albatroz UI in the current Expo project.

    This command will:
    1. Check that the current directory is an Expo project
    2. Install lucide-react-native if it is missing (asking for a package manager)
    3. Write albatroz.json with the component source and detected dependencies

    Examples:
        albatroz init
        albatroz init --package-manager pnpm
        albatroz init --base-url https://example.com/components
    """
    show_banner()
    _validate_package_manager(package_manager)
    if base_url:
        try:
            base_url = normalize_base_url(base_url)
        except ValueError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)

    if not initialize_project(Path.cwd(), package_manager=package_manager, base_url=base_url, debug=debug):
        raise typer.Exit(1)


@app.command()
def add(
    component: Optional[str] = typer.Argument(None, help="Component to add, e.g. alert"),
    package_manager: str = typer.Option(None, "--package-manager", "-p", help="Package manager used if the project still needs initializing"),
    skip_tls: bool = typer.Option(False, "--skip-tls", help="Skip SSL/TLS verification (not recommended)"),
    github_token: str = typer.Option(None, "--github-token", help="GitHub token for downloads (or set GH_TOKEN or GITHUB_TOKEN environment variable)"),
    debug: bool = typer.Option(False, "--debug", help="Show verbose diagnostic output on failures"),
):
    """
    Add a component to src/components/ui.

    Runs init first when albatroz.json is missing. Without a component name,
    lists the available components.

    Examples:
        albatroz add
        albatroz add alert
        albatroz add Card --skip-tls
    """
    project_path = Path.cwd()
    check_expo_project(project_path)

    if not config_exists(project_path):
        _validate_package_manager(package_manager)
        console.print(f"\n[yellow]No {CONFIG_FILE} found, running init first.[/yellow]")
        if not initialize_project(project_path, package_manager=package_manager, debug=debug):
            raise typer.Exit(1)

    try:
        config = read_config(project_path)
    except (OSError, ValueError) as e:
        console.print(Panel(f"Could not read {CONFIG_FILE}: {escape(str(e))}", title="Config Error", border_style="red"))
        console.print(f"[bright_black]Fix or delete {CONFIG_FILE} and run 'albatroz init' again.[/bright_black]")
        raise typer.Exit(1)

    if not component:
        print_available_components()
        console.print("\n[bright_black]Usage:[/bright_black]")
        console.print("[yellow]  albatroz add <component>[/yellow]")
        return

    display_name = resolve_component(component)
    if display_name is None:
        console.print(f"\n[red]Component not available:[/red] {escape(component)}")
        print_available_components()
        return

    tracker = StepTracker(f"Add {display_name}")
    tracker.add("download", "Download component")
    tracker.add("write", "Write component file")

    failure = None
    target = None
    with _build_client(skip_tls) as client:
        with Live(tracker.render(), console=console, refresh_per_second=8, transient=True) as live:
            tracker.attach_refresh(lambda: live.update(tracker.render()))
            try:
                target = add_component(
                    project_path,
                    component,
                    config,
                    client=client,
                    github_token=github_token,
                    tracker=tracker,
                )
            except Exception as e:
                failure = e

    console.print(tracker.render())

    if failure is not None:
        console.print(f"\n[red]Failed to add component {display_name}[/red]")
        console.print(Panel(escape(str(failure)) or type(failure).__name__, title="Error Details", border_style="red"))
        if debug:
            console.print(_debug_panel([
                ("URL", component_url(display_name, config["baseUrl"])),
                ("Error", type(failure).__name__),
            ]))
        raise typer.Exit(1)

    console.print(f"\n[bold green]Component {display_name} added successfully![/bold green]")
    console.print(f"[bright_black]Location: {target.relative_to(project_path).as_posix()}[/bright_black]")


@app.command()
def check():
    """Check that Node.js, a package manager and git are installed."""
    show_banner()
    console.print("[bold]Checking for installed tools...[/bold]\n")

    tracker = StepTracker("Check Available Tools")
    tools = [
        ("node", "Node.js runtime"),
        ("npm", "npm"),
        ("yarn", "Yarn"),
        ("pnpm", "pnpm"),
        ("git", "Git version control"),
    ]
    for tool, label in tools:
        tracker.add(tool, label)

    results = {tool: check_tool_for_tracker(tool, tracker) for tool, _ in tools}

    console.print(tracker.render())

    console.print("\n[bold green]Albatroz CLI is ready to use![/bold green]")

    if not results["node"]:
        console.print("[dim]Tip: Install Node.js to run Expo projects[/dim]")
    if not any(results[manager] for manager in PACKAGE_MANAGER_CHOICES):
        console.print("[dim]Tip: Install npm, yarn or pnpm so init can add lucide-react-native[/dim]")


def main():
    app()


if __name__ == "__main__":
    main()
