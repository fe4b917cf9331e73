"""
Interactive resolution when the download target already exists.

  File "App.tsx" already exists in this directory.
  What would you like to do?
    1. Replace the existing file
    2. Save as "App (2).tsx"
    3. Enter a custom filename
    4. Cancel

Option 3 opens a sub-prompt for a custom name. Inside it:

  - an empty line is refused until a name has been rejected; after that it
    goes back to the menu above
  - a name that doesn't exist yet is accepted
  - a name that exists is rejected once; typing the very same name again
    reopens the menu for that name (so it can be replaced or numbered)

Reopening is a transition of the loop below, not a recursive call, so the
stack stays flat however many times it happens.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from dropcode.filenames import file_exists, is_plain_filename, numbered_filename
from dropcode.prompt import PromptSession

logger = logging.getLogger(__name__)


class Action(enum.Enum):
    REPLACE = 'replace'
    AUTO_NUMBERED = 'auto_numbered'
    CUSTOM = 'custom'
    CANCEL = 'cancel'


@dataclass(frozen=True)
class ConflictDecision:
    action: Action
    filename: Optional[str] = None

    @property
    def overwrite(self) -> bool:
        return self.action is Action.REPLACE

    @property
    def cancelled(self) -> bool:
        return self.action is Action.CANCEL


# Outcomes of the custom-name sub-prompt
_BACK = 'back'
_REOPEN = 'reopen'
_ACCEPT = 'accept'

_RETRY_HINT = ('Press Enter to return to main menu, or enter the same filename '
               'again to see options for this file.')


def resolve_conflict(filename, directory='.', prompt=None):
    """
    Ask the user what to do about an existing `filename` in `directory`.

    Returns a ConflictDecision. Errors reading input (PromptIOError) are
    propagated; the prompt session is released either way.
    """
    session = prompt if prompt is not None else PromptSession()
    with session:
        decision = _run(session, filename, directory)
    logger.debug('Conflict on %s resolved: %s %s',
                 filename, decision.action.value, decision.filename)
    return decision


def _run(prompt, original, directory):
    while True:
        auto_name = numbered_filename(original, directory)
        _show_menu(prompt, original, auto_name)

        choice = prompt.ask('\nEnter your choice (1-4): ').strip()

        if choice == '1':
            return ConflictDecision(Action.REPLACE, original)

        if choice == '2':
            return ConflictDecision(Action.AUTO_NUMBERED, auto_name)

        if choice == '3':
            outcome, name = _custom_name(prompt, directory)
            if outcome == _ACCEPT:
                return ConflictDecision(Action.CUSTOM, name)
            if outcome == _REOPEN:
                logger.debug('Reopening conflict menu for %s', name)
                original = name
            continue

        if choice == '4':
            return ConflictDecision(Action.CANCEL)

        prompt.say('Invalid choice. Please enter 1, 2, 3, or 4.')


def _show_menu(prompt, original, auto_name):
    prompt.say(f'\nFile "{original}" already exists in this directory.')
    prompt.say('What would you like to do?')
    prompt.say('  1. Replace the existing file')
    prompt.say(f'  2. Save as "{auto_name}"')
    prompt.say('  3. Enter a custom filename')
    prompt.say('  4. Cancel')


def _custom_name(prompt, directory):
    """Run the custom-name sub-prompt. Returns (outcome, name)."""
    rejected = None

    while True:
        name = prompt.ask('Enter custom filename: ').strip()

        if not name:
            if rejected is None:
                prompt.say('Filename cannot be empty. Please try again.')
                continue
            return _BACK, None

        if not is_plain_filename(name):
            prompt.say(f'Error: "{name}" is not a plain filename. '
                       'Path separators are not allowed.')
            continue

        if not file_exists(name, directory):
            return _ACCEPT, name

        if rejected is not None and name == rejected:
            return _REOPEN, name

        rejected = name
        prompt.say(f'Error: File "{name}" already exists.')
        prompt.say(_RETRY_HINT)
