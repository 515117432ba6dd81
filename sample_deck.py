import random

from config_utils import AppConfig
from deck_utils import DeckController

SAMPLE_CARDS = [
    ("What is a Java Virtual Machine (JVM)?", "An abstract machine that enables a computer to run Java programs."),
    ("What is the main method in Java?", "The entry point for any Java program."),
    ("What is a class in Java?", "A blueprint for creating objects."),
    ("What is an object in Java?", "An instance of a class."),
    ("What are the primitive data types in Java?", "byte, short, int, long, float, double, boolean, char."),
    ("What is a variable?", "A container that holds the value during the Java program execution."),
    ("What is a constructor in Java?", "A special method used to initialize objects."),
    ("How do you declare a variable in Java?", "datatype variableName = value;"),
    ("What is an array in Java?", "A group of like-typed variables referred to by a common name."),
    ("What does the 'public' keyword mean?", "The member can be accessed from anywhere."),
]


def build_controller(config: AppConfig) -> DeckController:
    """Start a study session from the configured seed deck."""
    cards = SAMPLE_CARDS if config.sample_deck else []
    return DeckController(cards, shuffle=config.shuffle, rng=random.Random(config.seed))
