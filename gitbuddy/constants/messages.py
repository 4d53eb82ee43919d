"""Pet dialogue and user-facing messages."""

from __future__ import annotations

# =============================================================================
# Mood Dialogue
# =============================================================================

MOOD_MESSAGES = {
    'excited': [
        "*BORK BORK* AMAZING WORK!!!",
        "*ZOOOMIES* YOU'RE ON FIRE!!!",
        "*backflip* CLEAN CODE! GOOD HUMAN!",
        "*spins in circles* THIS IS THE BEST DAY EVER!",
        "*happy howl* AROOOOO! SUCCESS!",
    ],
    'happy': [
        "*happy bark* Your commit streak is on fire!",
        "*tail wag* I love how clean this repo is!",
        "*panting* You're an amazing coder!",
        "*rolls over* Best. Human. Ever.",
        "*bork* Your code is looking great today!",
    ],
    'neutral': [
        "*sniff* Just checking things out...",
        "*sits* Everything seems okay here.",
        "*yawn* A quiet day in the repo.",
        "*ear flick* I'm here if you need me.",
    ],
    'sad': [
        "*whimper* It's been a while since your last commit...",
        "*sad eyes* I found uncommitted files gathering dust...",
        "*soft whine* I miss seeing your code...",
        "*droopy ears* The repo feels lonely...",
    ],
    'sick': [
        "*shiver* There might be issues in the code...",
        "*cough* This repo needs some love...",
        "*weak bark* Please check on things...",
        "*lies down* I need rest... and maybe some bug fixes...",
    ],
    'sleeping': [
        "zzz... *dreaming of squirrels*... zzz",
        "zzz... *twitches ear*... zzz",
        "zzz... *soft snoring*... zzz",
    ],
}

# =============================================================================
# Context Messages
# =============================================================================

WELCOME_BACK_MESSAGES = {
    'long': "Welcome back! I missed you so much!",
    'short': "*happy bark* Couldn't stay away, huh?",
}

LEVEL_UP_MESSAGE = "*HOWLS WITH JOY* I LEVELED UP!!!"
FEED_MESSAGE = "*nom nom* Mmm, delicious code fixes!"
EMPTY_BOWL_MESSAGE = "*sniff sniff* No TODOs or debug prints. Spotless! Here's a treat anyway."
NO_STAGED_CHANGES_MESSAGE = "*sniff sniff* I don't smell any staged changes! Try `git add` first."
COMMIT_SUCCESS_MESSAGE = "*proud bark* Committed! Good human!"
COMMIT_FAILED_MESSAGE = "*whimper* The commit didn't go through."
NOT_A_REPO_MESSAGE = "*confused head tilt* I can't find a git repository here. Run me inside one!"
LOCKED_FEATURE_MESSAGE = "*tilts head* I'm too little for that! Reach level {level} to unlock {feature}."
NO_PET_MESSAGE = "*empty kennel* No buddy lives here yet. Run `gitbuddy status --name <name>` to adopt one."
CORRUPT_STATE_MESSAGE = "*scratches head* My memory got scrambled, so we're starting fresh."

FOCUS_MESSAGES = [
    "*quiet panting* You've been focused. Great start!",
    "*settles down* You're in the zone.",
    "*soft tail wag* Keep it up!",
    "*perks ears* You're doing great!",
    "*focused stare* I believe in you!",
    "*gentle nod* Stay focused, friend.",
    "*watches proudly* You're amazing!",
]

ACHIEVEMENT_UNLOCKED_MESSAGE = "*BORK BORK* WE DID IT! I'M SO PROUD!"
CHALLENGE_COMPLETE_MESSAGE = "*victory lap* Daily challenge complete!"

# =============================================================================
# Play
# =============================================================================

FUN_FACT_TEMPLATES = {
    'age': "Did you know? The first commit in this repo was made {days} days ago!",
    'commits': "You've made {commits} commits in total. That's a lot of code!",
    'message_length': "The average commit message length here is {length} characters.",
    'extension': "You love {extension} files - there are {count} of them!",
}
FUN_FACT_FALLBACK = "This repo is full of mysteries!"

BELLY_RUB_MESSAGES = [
    "*rolls over* Best. Human. Ever.",
    "*leg kicks uncontrollably* Right there!",
    "*happy wiggle* More rubs please!",
]
