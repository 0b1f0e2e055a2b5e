#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Terminal front end that ties the generator and the history store together"""

from securepass.config import get_data_dir, get_db_path
from securepass.constants import DEFAULT_LENGTH, MIN_LENGTH, MAX_LENGTH, HISTORY_LIMIT
from securepass.exceptions import StorageError
from securepass.generator import GenerationRequest, generate
from securepass.history import HistoryStore
from securepass.utils import BACK, get_validated_input, get_validated_int, format_entry

OPTION_LABELS = {
    'uppercase': "Uppercase (A-Z)",
    'lowercase': "Lowercase (a-z)",
    'numbers': "Numbers (0-9)",
    'symbols': "Symbols (!@#$)",
}


class SecurePassApp:
    """Holds the generator options, the current password and the rendered history"""

    def __init__(self, data_dir=None, history=None, logger=None, input_func=input):
        """
        Initialize the application

        Args:
            data_dir: Directory for the history database, defaults to the configured one
            history: Optional HistoryStore to use instead of opening one in data_dir
            logger: Optional logger instance
            input_func: Function used to read user input
        """
        self.data_dir = data_dir or get_data_dir()
        self.logger = logger
        self.input_func = input_func
        self.history_store = history or HistoryStore(get_db_path(self.data_dir), logger)

        self.length = DEFAULT_LENGTH
        self.options = {name: True for name in OPTION_LABELS}
        self.password = ""
        self.history = []
        self.last_error = None

    async def start(self):
        """Open the history store and load the current history"""
        try:
            await self.history_store.open()
        except StorageError as e:
            self._report_storage_error(e)
            return False
        await self.refresh_history()
        return True

    async def stop(self):
        await self.history_store.close()

    def set_length(self, length):
        """
        Set the password length

        Args:
            length: New length, must be within the allowed range

        Returns:
            The new length
        """
        if not MIN_LENGTH <= length <= MAX_LENGTH:
            raise ValueError(f"Length must be between {MIN_LENGTH} and {MAX_LENGTH}")
        self.length = length
        return self.length

    def toggle_option(self, name):
        """Flip one character class option and return its new value"""
        if name not in self.options:
            raise KeyError(name)
        self.options[name] = not self.options[name]
        return self.options[name]

    async def generate_password(self):
        """
        Generate a password with the current options and record it

        Returns:
            GenerationResult from the generator
        """
        request = GenerationRequest.from_options(self.length, **self.options)
        result = generate(request, logger=self.logger)
        self.password = result.display

        if not result.ok:
            return result

        try:
            await self.history_store.add(result.password)
        except StorageError as e:
            self._report_storage_error(e)
            return result

        await self.refresh_history()
        return result

    async def refresh_history(self):
        """Reload the newest history entries"""
        try:
            self.history = await self.history_store.list(HISTORY_LIMIT)
        except StorageError as e:
            self._report_storage_error(e)
        return self.history

    async def clear_history(self):
        """
        Erase the stored history

        Returns:
            True if the history was cleared, False otherwise
        """
        try:
            await self.history_store.clear()
        except StorageError as e:
            self._report_storage_error(e)
            return False

        self.history = []
        return True

    def _report_storage_error(self, error):
        self.last_error = error
        if self.logger:
            self.logger.error(f"History storage error: {error}")
        print(f"❌ History unavailable: {error}")

    def _print_history(self):
        print("\n=== History ===")
        if not self.history:
            print("No history yet")
            return
        for idx, entry in enumerate(self.history, 1):
            print(format_entry(idx, entry))

    def _print_status(self):
        print("\n=== SecurePass ===")
        print(f"🔑 {self.password or 'Your password here'}")
        enabled = [OPTION_LABELS[name] for name, on in self.options.items() if on]
        print(f"Length: {self.length}")
        print(f"Options: {', '.join(enabled) if enabled else 'none'}")

    async def run_interactive_menu(self):
        """Run an interactive menu until the user exits"""
        await self.start()
        await self.generate_password()

        try:
            while True:
                self._print_status()
                print("1. Generate password")
                print("2. Set length")
                print("3. Toggle character options")
                print("4. Show history")
                print("5. Clear history")
                print("6. Exit")

                choice = get_validated_input(
                    "\nChoose an option (1-6): ",
                    valid_options=['1', '2', '3', '4', '5', '6'],
                    allow_back=False,
                    input_func=self.input_func,
                    logger=self.logger
                )

                if choice == '1':
                    await self.generate_password()
                elif choice == '2':
                    self._handle_set_length()
                elif choice == '3':
                    self._handle_toggle_options()
                elif choice == '4':
                    self._print_history()
                elif choice == '5':
                    if await self.clear_history():
                        print("✅ History cleared")
                elif choice == '6':
                    print("Exiting SecurePass.")
                    break
        finally:
            await self.stop()

    def _handle_set_length(self):
        length = get_validated_int(
            f"Password length ({MIN_LENGTH}-{MAX_LENGTH}): ",
            min_value=MIN_LENGTH,
            max_value=MAX_LENGTH,
            default=self.length,
            input_func=self.input_func
        )
        if length == BACK:
            return
        self.set_length(length)

    def _handle_toggle_options(self):
        names = list(OPTION_LABELS)
        for idx, name in enumerate(names, 1):
            mark = "x" if self.options[name] else " "
            print(f"{idx}. [{mark}] {OPTION_LABELS[name]}")

        choice = get_validated_input(
            "Toggle which option: ",
            valid_options=[str(i) for i in range(1, len(names) + 1)],
            input_func=self.input_func,
            logger=self.logger
        )
        if choice == BACK:
            return
        self.toggle_option(names[int(choice) - 1])
