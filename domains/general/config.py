"""General domain configuration."""

# Follow-up timeouts for !randomTeams (seconds)
VOICE_CONFIRM_TIMEOUT = 30
NAMES_TIMEOUT = 60

TEAM_COLUMN_GAP = 10
HELP_COLOUR = 0x0099FF

EIGHT_BALL_RESPONSES = [
    "It is certain.",
    "Without a doubt.",
    "Yes definitely.",
    "You may rely on it.",
    "As I see it, yes.",
    "Most likely.",
    "Outlook good.",
    "Signs point to yes.",
    "Reply hazy, try again.",
    "Ask again later.",
    "Better not tell you now.",
    "Cannot predict now.",
    "Concentrate and ask again.",
    "Don't count on it.",
    "My reply is no.",
    "My sources say no.",
    "Outlook not so good.",
    "Very doubtful.",
]
