#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Input and formatting helpers for the SecurePass terminal front end"""

BACK = '_BACK_'


def _prompt(prompt, convert, default=None, allow_back=True, input_func=input):
    """
    Read lines until convert accepts one

    convert raises ValueError with the message to show on bad input.
    """
    if allow_back:
        prompt = prompt.rstrip(': ') + " (or 'b' to go back): "

    while True:
        user_input = input_func(prompt).strip()
        if allow_back and user_input.lower() in ('b', 'back'):
            return BACK
        if not user_input and default is not None:
            return default
        try:
            return convert(user_input)
        except ValueError as e:
            print(f"⚠️ {e}")


def get_validated_input(prompt, valid_options, default=None, allow_back=True,
                        input_func=input, logger=None):
    """
    Ask for one of a fixed set of answers

    Args:
        prompt: Text to display to the user
        valid_options: Accepted answers, compared case-insensitively
        default: Value returned on an empty answer
        allow_back: Whether 'b' or 'back' returns BACK
        input_func: Function used to read a line
        logger: Optional logger instance

    Returns:
        The lower-cased answer, the default, or BACK
    """
    def choose(answer):
        answer = answer.lower()
        if answer not in valid_options:
            raise ValueError(f"Invalid input. Valid options are: {', '.join(valid_options)}")
        if logger:
            logger.debug(f"Menu answer: {answer}")
        return answer

    return _prompt(prompt, choose, default, allow_back, input_func)


def get_validated_int(prompt, min_value, max_value, default=None, allow_back=True, input_func=input):
    """Ask for an integer in [min_value, max_value]; returns the value, the default, or BACK"""
    def to_int(answer):
        try:
            value = int(answer)
        except ValueError:
            raise ValueError("Please enter a valid number.") from None
        if not min_value <= value <= max_value:
            raise ValueError(f"Value must be between {min_value} and {max_value}.")
        return value

    return _prompt(prompt, to_int, default, allow_back, input_func)


def format_entry(index, entry):
    """One line of the history list, with local insertion time"""
    created = entry.created_at.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    return f"{index}. {entry.password}  ({created})"
