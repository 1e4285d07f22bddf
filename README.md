# splendorui

Interface state for a Splendor board game. The package draws nothing. It keeps
track of what the screens know and what the player has chosen: which option is
checked, which tokens were picked, whose turn it is, and who leads the
leaderboard. A renderer of your choice can draw from that state.

It uses only the standard library.

## Installation

```
pip install .
```

To install pytest as well, add the `test` extra:

```
pip install ".[test]"
```

## Modules

- `splendorui.colors`
  - `Color(r, g, b, a=255)` is a frozen RGBA colour. Each channel must be 0 to 255.
  - `+` and `-` work channel by channel and saturate at 255 and 0.
  - The palette constants are `NEUTRAL_WHITE`, `DARK_BLUE`, `GOLD_YELLOW`, `TRANSPARENT`, `OPAQUE_WHITE` and others.
- `splendorui.panel`
  - `Event` holds an `EventType`, an `x`/`y` position and an optional `MouseButton`.
  - `Panel` holds drawables and colliders:
    - `add_drawable`, `add_collider` and `add_item` add content.
    - `collider(index)` and `drawable(index)` return the item at that index, or `None` when the index is out of range.
    - `draw(target)` draws the content only when the panel is `active`.
    - `handle_event(event)` passes events on only when the panel is both `active` and `interactable`.
- `splendorui.selector`
  - `Selector` is a named on/off option. Use `set_state` and `change_state` to change it.
  - `SelectorBox` adds a hit rectangle. A left press inside it toggles the box, and the box's `Design` and mark colour follow its state.
  - `SelectorType` has the values `CHECK` and `RADIO`.
- `splendorui.options`
  - `OptionsPanel(title, OptionsType.CHECK | OptionsType.RADIO, ...)` is a row of `SelectorBox` options.
  - `add_option(name)` places each new option to the right of the previous one.
  - On a radio panel, the first option starts checked, and exactly one option stays checked after each left click.
  - `is_checked(name)` raises `ValueError` for an unknown name.
  - `first_checked()` returns the name of the first checked option, or `""` when none is checked.
- `splendorui.info`
  - `InfoPanel` keeps a turn counter (`increment_turn`) and a timer (`start_timer(now)`, `update_time(now)`, `stop_timer`). Its `time_label` and `turn_label` hold the text to display.
  - `format_elapsed(seconds)` returns `HH:MM:SS` and raises `ValueError` for negative durations.
- `splendorui.leaderboard`
  - `Leaderboard.from_lines(lines)` counts the log lines that contain `[Win]`. It credits each win to the first known player named in the line (Adrian, Bogdan, Eugen, Teodor) and takes the win date from the 21 characters that start at column 9.
  - `Leaderboard.load(path)` reads a log file. A missing file gives a board where every player has zero wins.
  - `ranked()` lists the entries with the most wins first. Ties stay in name order.
  - Module-level helpers: `is_win_line(line)` and `player_in_line(line)`.
- `splendorui.tutorial`
  - `TutorialPager` keeps track of the screenshot on display with `next()` and `previous()`.
  - `current` is the path of the screenshot on display.
  - `image_paths()` lists the paths of all screenshots.
- `splendorui.tokens`
  - `TokenPicker.pick(token, available)` applies the rules for taking tokens from the board: up to three tokens of different types, or two of the same type when at least three of that type are left. `clear()` empties the pick.
  - `TokenReturnSelection` tracks the tokens a player gives back to get down to the held-token limit (10 by default):
    - `set_initial(tokens)` starts a selection from the tokens the player holds.
    - `pick_to_return(token)` and `put_back(token)` move one token between the held tokens and those given back.
    - `reset()` undoes every choice since `set_initial`.
    - `confirm()` accepts the selection only at the limit. Otherwise it returns `False` and sets `warning`.
- `splendorui.sessions`
  - `PregameForm` holds the game-mode, player-count and Timer/A.I. options. `setup()` returns a `PregameSetup`.
  - `SoundSettings` holds the Sound On/Mute choices for music and for effects. `update()` sets `active_sound` and `active_sfx` and calls the optional `play_music`/`pause_music` callbacks.
- `splendorui.players`
  - `PlayerPanel` keeps a player's name, prestige points (`prestige_label`), profile icon and hover/click colours.
    - Clicking a panel sets its `triggered` flag.
    - An optional `play_sfx` callback is called when the mouse enters the panel and when the panel is clicked.
  - `PlayersPanel` stacks up to four player panels and shuffles the user icons among them.
    - It keeps a pointer at the current player, which `point_to_next_player()` moves on.
    - `take_triggered()` returns the panel that was clicked and clears every panel's `triggered` flag.
    - `add_prestige_points_to_current(points)` and `sync_adversary_prestige_points(points)` update prestige points.
- `splendorui.xmlprint`
  - `XmlNode` is a node of a small XML tree. `append(child)` adds a child, `set_attribute(name, value)` sets an attribute, and `children()` and `attributes()` iterate over them.
  - `print_xml(node, flags=0)` renders the tree with tab indentation and entity escaping. Pass `PRINT_NO_INDENTING` to get compact output.

## Example

```python
from splendorui.tokens import TokenPicker

picker = TokenPicker()
picker.pick("ruby", available=4)      # True
picker.pick("ruby", available=4)      # True: two of a kind, enough left
picker.pick("emerald", available=4)   # False: a pair ends the turn's picks
print(picker.picked)                  # ('ruby', 'ruby', None)
```

## What this package does not do

This package has no window, no drawing, no fonts, no textures and no sound
playback. Textures and screenshots appear only as path strings, and sounds only
as names passed to callbacks you supply.

It also has no game rules beyond picking tokens and giving them back. There are
no decks, cards, board or player hands. There is no networking and no command
to run.

## Running the tests

```
pytest
```