from term_lessons.lessons.put_characters import put_characters
from term_lessons.lessons.read_keys import read_keys
from term_lessons.lessons.moving import moving
from term_lessons.lessons.colors import colors
from term_lessons.lessons.random_colors import random_colors

LESSONS = {
    "put-chars": put_characters,
    "read-keys": read_keys,
    "move": moving,
    "colors": colors,
    "random-colors": random_colors,
}
