"""Game controller sequencing observation, rules and persistence per action."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple

from .actions.feed import find_code_issues
from .actions.focus import FocusSession, focus_xp
from .actions.heatmap import Heatmap, build_heatmap
from .actions.play import belly_rub_message, pick_fun_fact
from .actions.smart_commit import suggest_commit
from .actions.tricks import Trick, get_trick, perform_trick, pick_trick, trick_xp
from .collectors.repo_observer import RepoObserver
from .config import Config
from .constants import HEATMAP_WEEKS, WELCOME_BACK_MESSAGES, XP_REWARDS
from .core import utils
from .core.models import (
    CommitSuggestion,
    FeedResult,
    FocusResult,
    FunStats,
    MoodState,
    RepoData,
    RepoHealth,
    TrickResult,
)
from .exceptions import (
    FeatureLockedError,
    GitBuddyError,
    InvalidTransitionError,
    PersistenceError,
    RepositoryUnavailableError,
)
from .game_elements.achievements import Achievement, check_achievements
from .game_elements.challenges import Challenge, check_challenge_progress, get_challenge, get_daily_challenge
from .game_elements.level_calculator import LevelCalculator
from .game_elements.mood import mood_state
from .health.scoring import HealthScorer, hp_from_health
from .state.persistence import StateStore
from .state.schema import BestSession, DailyChallengeState, DailyCounters, PetState

logger = logging.getLogger(__name__)

# Achievement XP can unlock level achievements, which is bounded by the level count
MAX_SETTLE_ROUNDS = 10


@dataclass(slots=True)
class Rewards:
    """Everything an action earned."""

    xp_gained: int = 0
    leveled_up: bool = False
    level: int = 1
    achievements: List[Achievement] = field(default_factory=list)
    challenge_completed: Optional[Challenge] = None


@dataclass(slots=True)
class StartupReport:
    """What happened while loading the pet."""

    state: PetState
    is_new: bool = False
    recovered_from_corruption: bool = False
    hp_lost: int = 0
    welcome_message: Optional[str] = None


@dataclass(slots=True)
class ScanOutcome:
    health: RepoHealth
    rewards: Rewards


@dataclass(slots=True)
class FeedOutcome:
    result: FeedResult
    rewards: Rewards


@dataclass(slots=True)
class PlayOutcome:
    activity: str
    message: str
    rewards: Rewards
    trick: Optional[Trick] = None
    trick_result: Optional[TrickResult] = None


@dataclass(slots=True)
class CommitOutcome:
    success: bool
    message: str
    rewards: Rewards = field(default_factory=Rewards)


@dataclass(slots=True)
class FocusOutcome:
    result: FocusResult
    rewards: Rewards
    counted: bool = True


class GameController:
    """Own the pet state, the latest health report and the focus session.

    Every action observes the repository, applies the game rules to a working
    copy of the state and persists the outcome with a single store update.
    """

    def __init__(self, store: StateStore, observer: RepoObserver, config: Optional[Config] = None) -> None:
        """Initialize the controller.

        Args:
            store: Pet state persistence
            observer: Repository observer
            config: Loaded configuration (defaults when omitted)
        """
        self.store = store
        self.observer = observer
        self.config = config or Config()
        self.state: Optional[PetState] = None
        self.health: Optional[RepoHealth] = None
        self.focus_session: Optional[FocusSession] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self, name: Optional[str] = None) -> StartupReport:
        """Load or adopt the pet and prepare it for a new session.

        Applies HP decay for the time away, rolls daily counters over to
        today, clears session actions and records the visit.
        """
        state = self.store.load()
        recovered = self.store.recovered_from_corruption

        if state is None:
            state = self.store.create(name or self.config.pet.default_name)
            self.state = state
            logger.info("Adopted %s", state.name)
            return StartupReport(state=state, is_new=True, recovered_from_corruption=recovered)

        moment = utils.now()
        decay = LevelCalculator.hp_decay(state.last_visit, moment)
        hours_away = utils.hours_between(state.last_visit, moment)

        welcome = None
        if hours_away > 24:
            welcome = WELCOME_BACK_MESSAGES["long"]
        elif hours_away > 1:
            welcome = WELCOME_BACK_MESSAGES["short"]

        changes = self._rollover(state, moment.date())
        changes.update(
            hp=LevelCalculator.apply_decay(state.hp, decay) if decay else state.hp,
            last_visit=moment,
            actions_this_session=[],
        )
        self.state = self.store.update(state, **changes)
        if decay:
            logger.info("%s lost %d HP while you were away", state.name, decay)

        return StartupReport(state=self.state, hp_lost=decay, welcome_message=welcome)

    def _rollover(self, state: PetState, today: date) -> Dict[str, Any]:
        """Changes that reset day-scoped data when the calendar day moved on."""
        today_iso = today.isoformat()
        changes: Dict[str, Any] = {}

        if state.daily_counters.date != today_iso:
            changes["daily_counters"] = DailyCounters.for_day(today_iso)

        focus = state.focus_sessions
        if focus.today_sessions and focus.last_session_date != today_iso:
            changes["focus_sessions"] = focus.model_copy(update={"today_sessions": 0})

        challenge = get_daily_challenge(state, today)
        if challenge != state.daily_challenge:
            changes["daily_challenge"] = challenge

        return changes

    @property
    def pet(self) -> PetState:
        """The loaded pet state."""
        return self._require_state()

    def _require_state(self) -> PetState:
        if self.state is None:
            raise PersistenceError("Pet state has not been loaded; call start() first")
        return self.state

    def _current_state(self, today: Optional[date] = None) -> PetState:
        """The loaded state, rolled over to ``today`` if the day changed since."""
        state = self._require_state()
        changes = self._rollover(state, today or utils.now().date())
        if not changes:
            return state
        if "daily_counters" in changes:
            logger.info("New day for %s, daily counters reset", state.name)
        self.state = self.store.update(state, **changes)
        return self.state

    def _require_level(self, feature: str) -> None:
        state = self._require_state()
        if not LevelCalculator.is_unlocked(feature, state.level):
            raise FeatureLockedError(feature, LevelCalculator.required_level(feature))

    def _require_repo(self) -> None:
        if not self.observer.is_git_repo():
            raise RepositoryUnavailableError("Not inside a git repository", path=str(self.observer.root))

    def reset(self) -> bool:
        """Delete the pet. Returns ``True`` if there was one."""
        self.state = None
        self.focus_session = None
        return self.store.reset()

    # ------------------------------------------------------------------
    # Rule application
    # ------------------------------------------------------------------

    def repo_data(self) -> RepoData:
        return self.observer.collect_repo_data(self.config.scanner.marker_patterns)

    @staticmethod
    def _track_todos(state: PetState, todos: Optional[int]) -> PetState:
        """Measure TODOs fixed today against the first count seen today.

        An unknown count (the search failed) leaves the counters untouched.
        """
        if todos is None:
            return state
        counters = state.daily_counters
        baseline = counters.todo_baseline if counters.todo_baseline is not None else todos
        fixed = max(counters.todos_fixed, baseline - todos)
        return state.model_copy(
            update={"daily_counters": counters.model_copy(update={"todo_baseline": baseline, "todos_fixed": fixed})}
        )

    def _settle(self, working: PetState, xp: int, repo_data: RepoData, today: Optional[date] = None) -> Rewards:
        """Grant XP, advance the daily challenge, unlock achievements and persist.

        Args:
            working: State with the action's own changes applied
            xp: XP earned by the action itself
            repo_data: Repository facts for rule evaluation
            today: Day for the daily challenge

        Returns:
            Rewards summary
        """
        original = self._require_state()
        start_level = LevelCalculator.level_from_xp(original.xp)
        rewards = Rewards()

        day = today or utils.now().date()
        if working.daily_counters.date != day.isoformat():
            working = working.model_copy(update=self._rollover(working, day))

        working = self._track_todos(working, repo_data.todos)
        working = LevelCalculator.add_xp(working, xp).state
        rewards.xp_gained += xp

        record = get_daily_challenge(working, day)
        progress = check_challenge_progress(working, repo_data, day)
        record = record.model_copy(update={"progress": progress.progress, "completed": progress.completed})
        working = working.model_copy(update={"daily_challenge": record})
        if progress.just_completed:
            challenge = get_challenge(record.challenge_id)
            rewards.challenge_completed = challenge
            working = working.model_copy(update={"challenges_completed": working.challenges_completed + 1})
            if challenge is not None:
                working = LevelCalculator.add_xp(working, challenge.xp_reward).state
                rewards.xp_gained += challenge.xp_reward

        for _ in range(MAX_SETTLE_ROUNDS):
            unlocked = check_achievements(working, repo_data)
            if not unlocked:
                break
            working = working.model_copy(
                update={"achievements": [*working.achievements, *(a.id for a in unlocked)]}
            )
            for achievement in unlocked:
                working = LevelCalculator.add_xp(working, achievement.xp_reward).state
                rewards.xp_gained += achievement.xp_reward
            rewards.achievements.extend(unlocked)

        changes = working.model_dump(exclude={"created_at"})
        self.state = self.store.update(original, **changes)
        rewards.level = self.state.level
        rewards.leveled_up = self.state.level > start_level
        if rewards.leveled_up:
            logger.info("%s reached level %d", self.state.name, self.state.level)
        return rewards

    @staticmethod
    def _record_action(state: PetState, action: str, **counter_increments: int) -> PetState:
        counters = state.daily_counters
        updated_counters = counters.model_copy(
            update={name: getattr(counters, name) + amount for name, amount in counter_increments.items()}
        )
        actions = state.actions_this_session
        if action not in actions:
            actions = [*actions, action]
        return state.model_copy(update={"daily_counters": updated_counters, "actions_this_session": actions})

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def scan(self) -> ScanOutcome:
        """Score the repository and turn the score into HP.

        Raises:
            RepositoryUnavailableError: Outside a repository with commits
        """
        state = self._current_state()
        health = HealthScorer.scan(self.observer.collect_health_input())
        self.health = health
        if not health.is_git_repo:
            raise RepositoryUnavailableError("No git repository with commits here", path=str(self.observer.root))

        working = state.model_copy(
            update={
                "hp": hp_from_health(health),
                "total_scans": state.total_scans + 1,
                "longest_streak": max(state.longest_streak, health.streak),
                "clean_tree_count": state.clean_tree_count + (1 if health.dirty_files == 0 else 0),
            }
        )
        rewards = self._settle(working, XP_REWARDS["scan"], self.repo_data())
        return ScanOutcome(health=health, rewards=rewards)

    def feed(self) -> FeedOutcome:
        self._require_repo()
        state = self._current_state()
        result = find_code_issues(self.observer, self.config.scanner.marker_patterns)

        working = self._record_action(state, "feed", feeds=1)
        working = working.model_copy(update={"total_feeds": state.total_feeds + 1})
        rewards = self._settle(working, result.xp_gained, self.repo_data())
        return FeedOutcome(result=result, rewards=rewards)

    def play(
        self,
        activity: str = "trick",
        trick_id: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ) -> PlayOutcome:
        """Play with the pet.

        Args:
            activity: ``trick``, ``fetch`` or ``belly``
            trick_id: Specific trick to perform (random otherwise)
            rng: Random source for trick and fact selection

        Raises:
            FeatureLockedError: Below the level that unlocks play or the trick
            InvalidTransitionError: For an unknown activity or trick
        """
        self._require_level("play")
        self._require_repo()
        state = self._current_state()

        trick: Optional[Trick] = None
        trick_result: Optional[TrickResult] = None
        if activity == "trick":
            if trick_id is None:
                trick = pick_trick(state.level, rng)
            else:
                trick = get_trick(trick_id)
                if trick is None:
                    raise InvalidTransitionError(f"Unknown trick '{trick_id}'")
                if trick.unlock_level > state.level:
                    raise FeatureLockedError(f"trick {trick.name}", trick.unlock_level)
            trick_result = perform_trick(trick, self.observer)
            xp = trick_xp(trick_result)
            message = trick_result.message
        elif activity == "fetch":
            xp = XP_REWARDS["fetch"]
            message = pick_fun_fact(self.observer.fun_stats(), rng)
        elif activity == "belly":
            xp = XP_REWARDS["play"]
            message = belly_rub_message(rng)
        else:
            raise InvalidTransitionError(f"Unknown play activity '{activity}'")

        working = self._record_action(state, "play", plays=1)
        working = working.model_copy(update={"total_plays": state.total_plays + 1})
        rewards = self._settle(working, xp, self.repo_data())
        return PlayOutcome(
            activity=activity, message=message, rewards=rewards, trick=trick, trick_result=trick_result
        )

    def suggest_commit(self) -> Optional[CommitSuggestion]:
        self._require_repo()
        return suggest_commit(self.observer.staged_diff_summary())

    def commit(self, message: str) -> CommitOutcome:
        """Commit the staged changes with a suggested message."""
        self._require_repo()
        state = self._current_state()
        if not self.observer.commit(message):
            return CommitOutcome(success=False, message=message)

        working = self._record_action(state, "commit", smart_commits=1, commits=1)
        working = working.model_copy(update={"total_smart_commits": state.total_smart_commits + 1})
        rewards = self._settle(working, XP_REWARDS["smart_commit"], self.repo_data())
        return CommitOutcome(success=True, message=message, rewards=rewards)

    def start_focus(self, minutes: Optional[int] = None, now: Optional[datetime] = None) -> FocusSession:
        """Start a focus session owned by this controller."""
        self._require_repo()
        if self.focus_session is not None:
            raise InvalidTransitionError("A focus session is already running")
        self.focus_session = FocusSession.start(minutes or self.config.focus.default_minutes, self.observer, now)
        return self.focus_session

    def finish_focus(self, now: Optional[datetime] = None) -> FocusOutcome:
        """End the running session and reward the work done.

        Sessions shorter than a minute earn nothing and are not counted.
        """
        session = self.focus_session
        if session is None:
            raise InvalidTransitionError("No focus session is running")
        self.focus_session = None

        state = self._current_state(now.date() if now else None)
        result = session.finish(self.observer, now)
        if result.minutes < 1:
            return FocusOutcome(result=result, rewards=Rewards(level=state.level), counted=False)

        today_iso = utils.today_iso(now)
        focus = state.focus_sessions
        best = focus.best_session
        if best is None or result.commits > best.commits:
            best = BestSession(
                commits=result.commits,
                lines=result.lines_added + result.lines_removed,
                minutes=result.minutes,
                date=today_iso,
            )
        today_sessions = focus.today_sessions if focus.last_session_date == today_iso else 0
        updated_focus = focus.model_copy(
            update={
                "total": focus.total + 1,
                "total_minutes": focus.total_minutes + result.minutes,
                "best_session": best,
                "today_sessions": today_sessions + 1,
                "last_session_date": today_iso,
            }
        )

        working = self._record_action(state, "focus", focus_sessions=1)
        working = working.model_copy(update={"focus_sessions": updated_focus})
        rewards = self._settle(working, focus_xp(result), self.repo_data(), now.date() if now else None)
        return FocusOutcome(result=result, rewards=rewards)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def mood(self, is_idle: bool = False, idle_seconds: float = 0) -> MoodState:
        state = self._require_state()
        return mood_state(state.hp, is_idle, idle_seconds, self.config.pet.idle_seconds)

    def fun_stats(self) -> FunStats:
        self._require_level("stats")
        return self.observer.fun_stats()

    def heatmap(self, weeks: int = HEATMAP_WEEKS) -> Heatmap:
        self._require_repo()
        today = utils.now().date()
        return build_heatmap(self.observer.daily_commit_counts(weeks * 7), today, weeks)

    def daily_challenge(self) -> Tuple[Challenge, DailyChallengeState]:
        """Today's challenge definition and its stored progress."""
        state = self._require_state()
        record = get_daily_challenge(state)
        challenge = get_challenge(record.challenge_id)
        if challenge is None:
            raise GitBuddyError(f"Unknown challenge '{record.challenge_id}'")
        return challenge, record


__all__ = [
    "CommitOutcome",
    "FeedOutcome",
    "FocusOutcome",
    "GameController",
    "PlayOutcome",
    "Rewards",
    "ScanOutcome",
    "StartupReport",
]
