"""Static reply texts sent by the command router."""

from __future__ import annotations

UNKNOWN_COMMAND = "Unknown command 🤔"
SAVED = "Saved! 👌"
NO_RECIPES = "There are no recipes yet 🙊\nBe the first to add one, see /add_sample."

HELP = """Commands:
/meal - return a random meal
/add - add new meal to the collection, see /add_sample.
    Format:

    /add

    photo: <photo url*>
    ===
    name: <meal name*>
    ===
    instructions: <instructions paragraph>
    ===
    description: <description paragraph>

    - Replace '<>' with content.
    - Delimiter === has to be provided after each section except the last one.
    - * means the value is required.
    - The order of the sections can be changed.
"""

HELLO = """Hi there! 👾
Don't know what to cook today?
Just ask me!

Send /meal command and I will find a meal for you.

For more information and other commands send /help"""

ADD_SAMPLE = """/add

photo: https://loopbarbados.com/sites/default/files/styles/blog_image_style/public/blogimages/Bajan-Backed-Chicken-Recipe.jpg?itok=bt3ZknC8
===
name: BAKED BAJAN CHICKEN
===
instructions:
1. Preheat oven to 450 degrees.
2. Smear the Bajan seasoning inside and under the skin of the chicken.
3. etc...
===
description: Delicious baked chicken with an ancient history cooked in Eastern Countries."""
