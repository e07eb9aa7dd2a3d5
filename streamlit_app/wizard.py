# streamlit_app/wizard.py
from typing import Callable, List, Optional

STEP_TITLES = ["Household", "Transportation", "Food & Diet", "Consumables & Waste", "Review"]


class FormWizard:
    """Bounded step counter for the multi-step form (steps are 1-based).

    ``on_change`` is called with the new step after every real transition,
    never when a move is blocked at either end.
    """

    def __init__(self, titles: Optional[List[str]] = None, on_change: Optional[Callable[[int], None]] = None):
        self.titles = list(titles or STEP_TITLES)
        self.max_step = len(self.titles)
        self.on_change = on_change
        self.step = 1

    @property
    def title(self) -> str:
        return self.titles[self.step - 1]

    @property
    def is_first(self) -> bool:
        return self.step == 1

    @property
    def is_last(self) -> bool:
        return self.step == self.max_step

    def _go(self, step: int) -> bool:
        if step < 1 or step > self.max_step or step == self.step:
            return False
        self.step = step
        if self.on_change:
            self.on_change(step)
        return True

    def next(self) -> bool:
        return self._go(self.step + 1)

    def prev(self) -> bool:
        return self._go(self.step - 1)

    def reset(self) -> bool:
        return self._go(1)

    def indicator(self):
        # (step, title, active) for the step bar
        return [(i, t, i == self.step) for i, t in enumerate(self.titles, start=1)]
