"""
Game Configuration Constants Module

This module defines the game rules and the word databases used by the
daily word game. The answer list is the pool the word of the day is drawn
from; the accepted-guess dictionary is every answer plus the extra words in
guesses.json.
"""

import json
import os
from typing import Dict, FrozenSet, List, Final

WORD_LENGTH: Final[int] = 5
"""
Number of letters in every answer and every guess.
"""

NUM_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per daily game.
"""


def _load_word_list(filename: str) -> List[str]:
    """
    Load a word list from a JSON file stored beside this module.

    Args:
        filename: Name of the JSON file containing an array of words

    Returns:
        List[str]: List of lowercase 5-letter words

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, filename)

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")

    if not isinstance(word_list, list):
        raise ValueError(f"{filename} must contain an array of words")

    if not word_list:
        raise ValueError(f"{filename} cannot be empty")

    lowercase_words = [word.strip().lower() for word in word_list]

    for word in lowercase_words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' in {filename} is not {WORD_LENGTH} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' in {filename} contains non-alphabetic characters")

    return lowercase_words


# Pool the daily word is picked from
ANSWER_WORDS: Final[List[str]] = _load_word_list('answers.json')

# Every word accepted as a guess (answers are always valid guesses)
DICTIONARY_WORDS: Final[FrozenSet[str]] = frozenset(ANSWER_WORDS) | frozenset(_load_word_list('guesses.json'))


def validate_word_list_integrity() -> bool:
    """
    Validates the integrity and consistency of the answer list.

    Checks that every answer is exactly WORD_LENGTH lowercase letters,
    that there are no duplicates, and that every answer is also an
    accepted guess.

    Returns:
        bool: True if the word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not ANSWER_WORDS:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(ANSWER_WORDS):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

        if word not in DICTIONARY_WORDS:
            raise ValueError(f"Word at index {index} '{word}' is missing from the dictionary")

    if len(ANSWER_WORDS) != len(set(ANSWER_WORDS)):
        duplicates = sorted({word for word in ANSWER_WORDS if ANSWER_WORDS.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics() -> Dict:
    """
    Summarizes the word databases for the health endpoint.

    Returns:
        dict: total_answers, total_dictionary_words, avg_vowel_count and
        the five most common answer letters
    """
    if not ANSWER_WORDS:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in ANSWER_WORDS)

    letter_frequency: Dict[str, int] = {}
    for word in ANSWER_WORDS:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_answers": len(ANSWER_WORDS),
        "total_dictionary_words": len(DICTIONARY_WORDS),
        "avg_vowel_count": round(total_vowels / len(ANSWER_WORDS), 2),
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")
        print(f" Word statistics: {get_word_statistics()}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
