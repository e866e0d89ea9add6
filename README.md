# skyrunner

A small finite runner game built on pygame. The runner moves across a
scrolling, parallax landscape. Collect coins, jump over monsters and
bombs, and reach the end of the level to win. The best score is kept in
a file between games.

## Installing

```
pip install .
```

This installs `pygame`, which opens the window, draws the sprites and
plays the sounds.

## Assets

The game reads its images, sounds, font, level maps and high-score file
from a directory named `assets` in the **current working directory**.
The package does not ship these files; you provide them. The game looks
for:

- `bg/bg.jpg`, `bg/cloud.png`, `bg/moutain.png`, `bg/grass.png`, `bg/balloon.png`
- `player/player_blue.png`, `player/player_red.png`,
  `player/player_purple.png`, `player/player_orange.png`
- `object/piece.png`, `object/little_monster.png`, `object/bomb.png`
- `btn/play_btn.png`, `btn/skin_btn.png`, `btn/leave_btn.png`,
  `btn/cursor.png`, `btn/skull.png`
- `music/piece.wav`, `music/jump.wav`, `music/background.ogg`
- `map/map_easy.txt`, `map/map_normal.txt`, `map/map_hard.txt`
- `american_font.ttf` (optional: without it pygame's default font is used)
- `high_score.txt` (optional: without it the home screen shows `0` and no
  score is saved)

## Playing

```
skyrunner
```

The home screen shows the title, the stored high score and three buttons:

- **Play** opens the difficulty screen (Easy, Normal or Hard, each a
  skull to click) and starts the matching map from `assets/map/`.
- **Skin** opens the skin screen, where clicking a runner picks its
  colour (Blue, Red, Purple or Gold). Escape returns to the home screen.
- **Leave** ends the game.

To play a map file of your own instead of picking a difficulty:

```
skyrunner path/to/map.txt
```

The home screen is still shown first; pressing Play then starts that map.
If the file cannot be read, `Map doesn't exist` is printed to standard
error and the command exits with status 1.

Any single argument starting with `-h` prints a usage summary and quits:

```
skyrunner -h
```

### Controls

| Key / action | Effect                                   |
|--------------|------------------------------------------|
| Space        | jump                                     |
| Mouse click  | press the menu buttons                   |
| Escape       | leave the skin screen; pause / resume in a run |

### Winning and losing

Touching a monster or a bomb shows "You lose !"; reaching the finish
line shows "You Won !" with the score. Either screen stays until the
window is closed. The score is the number of coins picked up. When the
window closes, the score is written over the start of
`assets/high_score.txt` if it beats the number stored there (the file is
not truncated).

## Map files

A map is a plain text file, one row per line. Reading stops at the first
`e`. In each row:

- `1` places a coin,
- `2` places a monster (with a random speed),
- `3` places a bomb (with a random speed),
- any other character is empty.

The first column of every row after the first is not read. The width of
the first row decides where the finish line lies. For example:

```
  1   1  3    1
 2   1    2  3 1e
```

## Using the modules

The game logic can be used without a window:

- `skyrunner.mapdata`: `load_map`, `count_tiles`, `tile_positions`,
  `remove_tile`, `row_width`, `win_position`, the `Tile` enum and
  `MapError`.
- `skyrunner.entities`: `Rect`, `GameObject`, `Player` (jump arc and
  animation frames), `ParallaxBackground` and `create_background`.
- `skyrunner.world`: `World.from_map`, `advance`, `collect_pieces`,
  `hits_hazard`, `check_win`, and the hit tests `piece_hits`,
  `monster_hits`, `bomb_hits`.
- `skyrunner.scores`: `parse_int`, `int_to_str`, `read_high_score`,
  `update_high_score`.
- `skyrunner.printf`: `format_printf` / `my_printf`, a small printf-style
  formatter (`%d %i %ld %lld %hd %u %s %S %c %o %x %X %p %b %%`).
- `skyrunner.render` and `skyrunner.menus` draw with pygame;
  `skyrunner.app.main` is the `skyrunner` command.

## Running the tests

```
pip install .[test]
pytest
```