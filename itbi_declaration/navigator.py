"""Linear four-step navigation gated on validation."""

import logging
from typing import Callable

from itbi_declaration.config import ReconciliationConfig
from itbi_declaration.exceptions import InvalidStepError
from itbi_declaration.models.enums import Step, TabState
from itbi_declaration.session import SessionContext
from itbi_declaration.store import FormStore
from itbi_declaration.validation import ValidationResult, validate_step

logger = logging.getLogger(__name__)

TransitionHook = Callable[[Step], None]


class StepNavigator:
    """Declarant -> Property -> Land use -> Review.

    Moving back (or staying) is always allowed. Moving forward validates the
    step being left; on failure the errors are merged into the store's
    error set and the navigator stays put.

    Parameters
    ----------
    store : FormStore
        Form values and error flags.
    session : SessionContext
        Session flags; once ``succeeded`` the wizard is locked on review.
    on_transition : Callable[[Step], None] | None
        Called after every successful transition (host scroll-to-top).
    config : ReconciliationConfig | None
        Passed through to the land-use validation.
    """

    def __init__(
        self,
        store: FormStore,
        session: SessionContext,
        on_transition: TransitionHook | None = None,
        config: ReconciliationConfig | None = None,
    ) -> None:
        self.store = store
        self.session = session
        self.on_transition = on_transition
        self.config = config
        self.current = Step.DECLARANT
        self.last_result: ValidationResult | None = None

    def go_to(self, step: Step | int) -> bool:
        """Try to move to ``step``.

        Returns
        -------
        bool
            ``True`` if the navigator is now on ``step``.

        Raises
        ------
        InvalidStepError
            If ``step`` is not 1-4.
        """
        try:
            target = Step(step)
        except ValueError:
            raise InvalidStepError(f"No such step: {step}") from None

        if self.session.succeeded and target != self.current:
            logger.debug("Navigation to step %d refused, declaration already generated", target)
            return False

        if target > self.current:
            result = validate_step(self.store.state, self.current, self.config)
            self.last_result = result
            if not result.passed:
                self.store.errors.merge(result.errors)
                logger.warning(
                    "Step %d blocked: %s", self.current, ", ".join(result.errors)
                )
                return False

        self.current = target
        logger.debug("Moved to step %d (%s)", target, target.title)
        self.notify()
        return True

    def next(self) -> bool:
        if self.current == Step.REVIEW:
            return False
        return self.go_to(self.current + 1)

    def back(self) -> bool:
        if self.current == Step.DECLARANT:
            return False
        return self.go_to(self.current - 1)

    def notify(self) -> None:
        """Fire the transition hook for the current step."""
        if self.on_transition is not None:
            self.on_transition(self.current)

    @property
    def progress_percent(self) -> float:
        if self.session.succeeded:
            return 100.0
        return (self.current - 1) / (len(Step) - 1) * 100

    def tab_states(self) -> dict[Step, TabState]:
        """Presentation state of each step tab."""
        states: dict[Step, TabState] = {}
        for step in Step:
            if self.session.succeeded or step < self.current:
                states[step] = TabState.DONE
            elif step == self.current:
                states[step] = TabState.ACTIVE
            else:
                states[step] = TabState.PENDING
        return states

    def reset(self) -> None:
        self.current = Step.DECLARANT
        self.last_result = None
