"""Release state machine.

    idle -> prerequisites_checked -> gates_passed -> version_bumped
         -> released | dry_run_complete

Any handler error moves the session to ``aborted`` and stops the machine.
Tag, commit and publish commands only exist in the ``version_bumped``
handler, which is only reachable after every hard gate passed, and that
handler never runs them when the request is a dry run.

A release that stopped after its version commit (for example because
`git tag` failed) is resumed by re-running it: when HEAD is the
``chore: release vX.Y.Z`` commit for the manifest version and that tag does
not exist yet, the bump is skipped and the release continues at the tag.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from datetime import date
from pathlib import Path

from yr.core.config import Config
from yr.core.result import Err, Ok, Result
from yr.git.repository import Repository
from yr.output.console import ConsoleProtocol
from yr.platform.files import atomic_write_text, read_text_exact
from yr.platform.process import ProcessRunner, format_command
from yr.release.errors import ReleaseError
from yr.release.gates import GateReport, QualityGateRunner
from yr.release.model import ReleaseRequest, ReleaseState
from yr.release.prereqs import PrerequisiteValidator
from yr.release.semver import SemVer
from yr.release.version_files import add_changelog_entry, read_version, write_version

__all__ = [
    "ReleaseOrchestrator",
    "ReleaseReport",
    "ReleaseSession",
    "run_state_machine",
]


@dataclass(frozen=True, slots=True)
class ReleaseSession:
    request: ReleaseRequest
    state: ReleaseState = ReleaseState.IDLE
    previous: SemVer | None = None
    version: SemVer | None = None
    gates: GateReport | None = None
    # Files written (or, in a dry run, that would be written).
    changed_files: tuple[Path, ...] = ()
    # Commands run (or, in a dry run, that would run) by the release step.
    commands: tuple[tuple[str, ...], ...] = ()
    # The version commit already exists; only tag and publish remain.
    resumed: bool = False
    error: ReleaseError | None = None


@dataclass(frozen=True, slots=True)
class ReleaseReport:
    session: ReleaseSession
    trail: tuple[ReleaseState, ...]

    @property
    def state(self) -> ReleaseState:
        return self.session.state

    @property
    def version(self) -> SemVer | None:
        return self.session.version


StepHandler = Callable[[ReleaseSession], Result[ReleaseSession, ReleaseError]]
OnTransition = Callable[[ReleaseSession], None]


def run_state_machine(
    *,
    initial: ReleaseSession,
    handlers: Mapping[ReleaseState, StepHandler],
    on_transition: OnTransition,
) -> ReleaseSession:
    current = initial

    while not current.state.is_terminal:
        outcome = handlers[current.state](current)
        if isinstance(outcome, Err):
            error = outcome.error
            if error.stage is None:
                error = replace(error, stage=str(current.state))
            current = replace(current, state=ReleaseState.ABORTED, error=error)
        else:
            current = outcome.value
        on_transition(current)

    return current


class ReleaseOrchestrator:
    def __init__(
        self,
        *,
        root: Path,
        config: Config,
        runner: ProcessRunner,
        console: ConsoleProtocol,
        today: date | None = None,
    ) -> None:
        self._root = root
        self._config = config
        self._runner = runner
        self._console = console
        self._today = today or date.today()
        self._repo = Repository(root, runner=runner)

    def run(self, request: ReleaseRequest) -> Result[ReleaseReport, ReleaseError]:
        self._console.info(f"Creating release ({request.bump})...")
        if request.dry_run:
            self._console.info("Running in dry-run mode...")

        trail: list[ReleaseState] = [ReleaseState.IDLE]
        final = run_state_machine(
            initial=ReleaseSession(request=request),
            handlers={
                ReleaseState.IDLE: self._check_prerequisites,
                ReleaseState.PREREQUISITES_CHECKED: self._run_gates,
                ReleaseState.GATES_PASSED: self._bump_version,
                ReleaseState.VERSION_BUMPED: self._release,
            },
            on_transition=lambda s: trail.append(s.state),
        )

        if final.state == ReleaseState.ABORTED:
            assert final.error is not None
            return Err(final.error)
        return Ok(ReleaseReport(session=final, trail=tuple(trail)))

    def _check_prerequisites(self, s: ReleaseSession) -> Result[ReleaseSession, ReleaseError]:
        validator = PrerequisiteValidator(
            root=self._root,
            config=self._config.release,
            runner=self._runner,
            console=self._console,
        )
        match validator.validate():
            case Err(e):
                return Err(e)
            case Ok(_):
                return Ok(replace(s, state=ReleaseState.PREREQUISITES_CHECKED))

    def _run_gates(self, s: ReleaseSession) -> Result[ReleaseSession, ReleaseError]:
        gates = QualityGateRunner(
            root=self._root,
            config=self._config.gates,
            runner=self._runner,
            console=self._console,
        )
        match gates.run():
            case Err(e):
                return Err(e)
            case Ok(report):
                return Ok(replace(s, state=ReleaseState.GATES_PASSED, gates=report))

    def _bump_version(self, s: ReleaseSession) -> Result[ReleaseSession, ReleaseError]:
        cfg = self._config.release
        manifest = self._root / cfg.version_file
        changelog = self._root / cfg.changelog

        current = read_version(manifest)
        if isinstance(current, Err):
            return current

        if self._awaiting_tag(current.value):
            tag = current.value.to_tag(cfg.tag_prefix)
            self._console.warning(f"HEAD is the release commit for {tag}; resuming at the tag")
            return Ok(
                replace(
                    s,
                    state=ReleaseState.VERSION_BUMPED,
                    previous=current.value,
                    version=current.value,
                    resumed=True,
                )
            )

        new = current.value.bump(s.request.bump)
        self._console.info(f"Updating version ({s.request.bump}): {current.value} -> {new}")

        changed: list[Path] = [manifest]
        if s.request.dry_run:
            self._console.info(f"[dry-run] would write version {new} to {cfg.version_file}")
            if changelog.is_file():
                changed.append(changelog)
                self._console.info(f"[dry-run] would add [{new}] to {cfg.changelog}")
        else:
            try:
                original = read_text_exact(manifest)
            except (OSError, UnicodeDecodeError) as e:
                return Err(
                    ReleaseError(
                        kind="version_file_failed",
                        message=f"failed to read {manifest.name}: {e}",
                        hint=str(manifest),
                    )
                )

            written = write_version(manifest, new)
            if isinstance(written, Err):
                return written

            if changelog.is_file():
                entry = add_changelog_entry(changelog, new, today=self._today)
                if isinstance(entry, Err):
                    return self._restore_manifest(manifest, original, entry.error)
                changed.append(changelog)
            else:
                self._console.warning(f"{cfg.changelog} not found, changelog not updated")
            self._console.success("Version updated successfully")

        return Ok(
            replace(
                s,
                state=ReleaseState.VERSION_BUMPED,
                previous=current.value,
                version=new,
                changed_files=tuple(changed),
            )
        )

    def _awaiting_tag(self, version: SemVer) -> bool:
        """True when a previous run committed ``version`` but never tagged it."""
        tag = version.to_tag(self._config.release.tag_prefix)
        match self._repo.head_subject():
            case Err(_):
                # No commits yet.
                return False
            case Ok(subject):
                if subject != _commit_message(tag):
                    return False
        return not self._repo.tag_exists(tag)

    def _restore_manifest(
        self, manifest: Path, original: str, error: ReleaseError
    ) -> Result[ReleaseSession, ReleaseError]:
        """Undo the version write so the tree is clean for a re-run."""
        try:
            atomic_write_text(manifest, original)
        except OSError as e:
            hint = f"{manifest.name} could not be restored ({e}); run: git checkout -- {manifest.name}"
            return Err(replace(error, hint=hint))
        return Err(
            replace(
                error,
                hint=f"{manifest.name} was restored; fix {self._config.release.changelog} and re-run the release",
            )
        )

    def _release(self, s: ReleaseSession) -> Result[ReleaseSession, ReleaseError]:
        assert s.version is not None
        tag = s.version.to_tag(self._config.release.tag_prefix)
        commit_message = _commit_message(tag)
        tag_message = f"Release {tag}"

        commit = tuple(self._repo.commit_all_argv(commit_message))
        create_tag = tuple(self._repo.tag_argv(tag, tag_message))
        publish = self._config.publish.commands
        if s.resumed:
            commands = (create_tag, *publish)
        else:
            commands = (commit, create_tag, *publish)

        if s.request.dry_run:
            for argv in commands:
                self._console.info(f"[dry-run] would run: {format_command(argv)}")
            self._console.success(f"Dry run complete: {tag} was not tagged or published")
            return Ok(replace(s, state=ReleaseState.DRY_RUN_COMPLETE, commands=commands))

        if not s.resumed:
            self._console.info(f"Running: {format_command(commit)}")
            committed = self._repo.commit_all(commit_message)
            if isinstance(committed, Err):
                return Err(
                    ReleaseError(
                        kind="tag_failed",
                        message=f"git commit failed (exit {committed.error.returncode})",
                        hint=f"commit the version changes as '{commit_message}', then re-run the release to tag it",
                    )
                )

        self._console.info(f"Running: {format_command(create_tag)}")
        tagged = self._repo.create_tag(tag, tag_message)
        if isinstance(tagged, Err):
            return Err(
                ReleaseError(
                    kind="tag_failed",
                    message=f"git tag failed (exit {tagged.error.returncode})",
                    hint=f"the release commit is in place; re-run the release to create {tag}",
                )
            )

        for i, argv in enumerate(publish):
            self._console.info(f"Running: {format_command(argv)}")
            rc = self._runner.run(argv, cwd=self._root)
            if rc != 0:
                remaining = "; ".join(format_command(a) for a in publish[i:])
                return Err(
                    ReleaseError(
                        kind="publish_failed",
                        message=f"{format_command(argv)} failed (exit {rc})",
                        hint=f"{tag} is tagged locally; do not re-run the release, run by hand: {remaining}",
                    )
                )

        self._console.success(f"Release {tag} created successfully")
        return Ok(replace(s, state=ReleaseState.RELEASED, commands=commands))


def _commit_message(tag: str) -> str:
    return f"chore: release {tag}"
