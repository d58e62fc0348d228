from __future__ import annotations
import random
from typing import Optional, Sequence

from kivy.logger import Logger

from fingerspelling.constants import MIN_WORD_LENGTH
from fingerspelling.models.state import Word, check_word_length

WORDS: tuple[str, ...] = (
    # 3 letters
    "act", "add", "age", "air", "all", "and", "ant", "ape", "arm", "art",
    "bad", "bag", "bat", "bed", "bee", "big", "box", "boy", "bus", "cab",
    "can", "cap", "car", "cat", "cow", "cry", "cup", "cut", "dad", "day",
    "dig", "dog", "dot", "dry", "ear", "eat", "egg", "elk", "end", "eye",
    "fan", "far", "fix", "fly", "fog", "fox", "fun", "gas", "gum", "hat",
    "hen", "hop", "hot", "ice", "ink", "jam", "jar", "jet", "joy", "key",
    "kid", "kit", "lab", "law", "leg", "lip", "log", "man", "map", "mix",
    "mom", "mud", "net", "new", "nut", "oak", "owl", "pan", "pen", "pet",
    "pig", "pot", "pie", "rat", "red", "run", "sad", "sea", "sit", "sky",
    "sun", "tea", "toy", "van", "wax", "web", "yak", "yes", "zip", "zoo",
    # 4 letters
    "able", "baby", "ball", "bark", "bell", "bird", "blue", "boat", "book",
    "cake", "calm", "coat", "cook", "cool", "deer", "desk", "door", "duck",
    "fish", "five", "food", "frog", "game", "gift", "girl", "goat", "good",
    "hand", "help", "hill", "home", "hope", "jump", "kind", "king", "kite",
    "lamp", "lion", "milk", "moon", "name", "nest", "nose", "park", "pink",
    "rain", "road", "rock", "sign", "snow", "star", "swim", "tall", "time",
    "tree", "wave", "wind", "wolf", "yard", "zero",
    # 5 letters
    "apple", "bread", "chair", "clock", "cloud", "dance", "dream", "earth",
    "fruit", "ghost", "grape", "green", "happy", "heart", "horse", "house",
    "juice", "known", "laugh", "lemon", "light", "mouse", "music", "night",
    "ocean", "paint", "piano", "plant", "queen", "quick", "river", "sheep",
    "shirt", "smile", "snake", "spoon", "table", "tiger", "train", "water",
    "whale", "world", "young", "zebra",
    # 6+ letters
    "animal", "banana", "basket", "bottle", "bridge", "butter", "candle",
    "castle", "cheese", "circle", "cookie", "dinner", "doctor", "flower",
    "forest", "friend", "garden", "guitar", "jacket", "kitten", "letter",
    "monkey", "number", "orange", "pencil", "people", "purple", "rabbit",
    "school", "silver", "spring", "summer", "turtle", "window", "winter",
    "yellow", "balloon", "chicken", "kitchen", "morning", "picture",
    "teacher", "weather", "elephant", "question", "sandwich",
)


def word_length_label(n: Optional[int]) -> str:
    return "Any" if n is None else f"{n} letters"


class WordSource:
    """Random draws from a static vocabulary, optionally capped by length."""

    def __init__(self, words: Sequence[str] = WORDS, max_length: Optional[int] = None, rng: Optional[random.Random] = None):
        self.words = [w.strip().lower() for w in words if len(w.strip()) >= MIN_WORD_LENGTH]
        if not self.words:
            raise ValueError("vocabulary has no words of 3+ letters")
        self.max_length = check_word_length(max_length)
        self._rng = rng or random.Random()

    def candidates(self) -> list[Word]:
        if self.max_length is None:
            return list(self.words)
        return [w for w in self.words if len(w) <= self.max_length]

    def get_random_word(self) -> Word:
        pool = self.candidates() or self.words
        word = self._rng.choice(pool)
        Logger.debug(f"Fingerspelling: current word: {word}")
        return word
