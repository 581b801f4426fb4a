"""Preview server for SlideSite.

Serves the built site for local authoring:
- Builds into a staging directory and swaps it into place, so the served
  directory is never half-written.
- Rejects directory listings with a 404.
- Watches the slide markdown and the theme, rebuilding on change.

Key classes:
- PreviewServer: Main class for running the preview server.
- _PreviewHandler: HTTP request handler that disables caching and listings.
- _ChangeHandler: File system event handler for triggering rebuilds.
"""

from __future__ import annotations

import functools
import os
import shutil
import threading
import time
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from .build import BuildError, build_site
from .config import load_config


class _PreviewHandler(SimpleHTTPRequestHandler):
    def end_headers(self):
        self.send_header("Cache-Control", "no-cache, no-store, must-revalidate")
        super().end_headers()

    def list_directory(self, path):  # pragma: no cover - exercised via send_head
        self.send_error(404, "File not found")
        return None


class PreviewServer:
    """Preview server that rebuilds the site when its sources change.

    Attributes:
        project_root: Root directory of the project.
        config: Site configuration.
        output_dir: Directory where the built site is served from.
        content_dir: Markdown directory being watched.
        theme: Theme stylesheet being watched.
        http_port: Port for the HTTP server.
    """

    def __init__(self, project_root: Path, http_port: int | None = None):
        self.project_root = project_root
        self.config = load_config(project_root)
        self.output_dir = project_root / str(self.config["output_dir"])
        self.content_dir = project_root / str(self.config["content_dir"])
        self.theme = project_root / str(self.config["theme"])
        self._staging_dir = self.output_dir.with_name(self.output_dir.name + ".staging")
        self.http_port = int(http_port or self.config.get("port", 4000))
        self._observer: Observer | None = None
        self._rebuilding = False
        self._last_rebuild_at = 0.0
        self._last_signature: tuple | None = None
        self._debounce_seconds = 0.05

    def start(self) -> None:  # pragma: no cover - integration path
        self.build()
        self._last_signature = self._compute_signature()
        threading.Thread(target=self._start_http, daemon=True).start()
        self._start_watcher()
        try:
            while True:
                time.sleep(1)
        except KeyboardInterrupt:
            self.stop()

    def stop(self) -> None:
        if self._observer:
            self._observer.stop()
            self._observer.join()

    def build(self) -> None:
        """Build into the staging directory, then replace the served output."""
        staging = self._prepare_staging_dir()
        build_site(
            self.project_root,
            config=self.config,
            output_dir_override=staging,
        )
        self._activate_staging(staging)

    def _start_http(self) -> None:  # pragma: no cover - integration path
        handler = functools.partial(_PreviewHandler, directory=str(self.output_dir))
        httpd = ThreadingHTTPServer(("", self.http_port), handler)
        print(f"Serving {self.output_dir} at http://localhost:{self.http_port}")
        httpd.serve_forever()

    def _start_watcher(self) -> None:
        handler = _ChangeHandler(self)
        observer = Observer()
        if self.content_dir.exists():
            observer.schedule(handler, str(self.content_dir), recursive=True)
        if self.theme.parent.exists():
            observer.schedule(handler, str(self.theme.parent), recursive=False)
        observer.start()
        self._observer = observer

    def rebuild(self) -> None:
        now = time.time()
        if self._rebuilding or (now - self._last_rebuild_at) < self._debounce_seconds:
            return
        signature = self._compute_signature()
        if signature is not None and signature == self._last_signature:
            return
        self._rebuilding = True
        try:
            print("Change detected; rebuilding...")
            self.build()
            self._last_signature = signature
        except (BuildError, OSError) as exc:
            # Keep serving the previous build until the sources are fixed.
            print(f"Rebuild failed: {exc}")
        finally:
            self._rebuilding = False
            self._last_rebuild_at = time.time()

    def _compute_signature(self) -> tuple | None:
        entries: list[tuple] = []
        paths: list[Path] = []
        if self.content_dir.exists():
            paths.extend(p for p in sorted(self.content_dir.rglob("*")) if not p.is_dir())
        if self.theme.is_file():
            paths.append(self.theme)
        for path in paths:
            try:
                stat = path.stat()
            except OSError:
                continue
            rel = path.relative_to(self.project_root)
            entries.append((str(rel), stat.st_mtime_ns, stat.st_size))
        return tuple(entries) if entries else None

    def _prepare_staging_dir(self) -> Path:
        staging = self._staging_dir
        if staging.exists():
            shutil.rmtree(staging)
        staging.parent.mkdir(parents=True, exist_ok=True)
        return staging

    def _activate_staging(self, staging: Path) -> None:
        target = self.output_dir
        if target.exists():
            shutil.rmtree(target)
        os.replace(staging, target)


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, server: PreviewServer):
        super().__init__()
        self.server = server

    def on_any_event(self, event):
        if event.is_directory:
            return
        path = Path(event.src_path)
        for ignored in (self.server.output_dir, self.server._staging_dir):
            try:
                path.relative_to(ignored)
                return
            except ValueError:
                pass
        if "node_modules" in path.parts:
            return
        self.server.rebuild()
