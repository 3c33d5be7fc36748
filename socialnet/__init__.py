"""Direct messaging and notification core of the social network backend."""
