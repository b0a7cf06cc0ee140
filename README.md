# skyraid

A vertical-scrolling arcade shooter. You fly a fighter near the bottom of the
screen, shoot down waves of enemies and stay clear of their fire.

## Installing

```
pip install .
```

This installs pygame as well.

## Playing

```
skyraid
```

Options:

| Option              | Meaning                                                         |
|---------------------|-----------------------------------------------------------------|
| `--resources DIR`   | Directory that holds the `resource/` folder (default: `.`)      |
| `--mute`            | Do not play background music                                    |

The window opens on a menu with **Start**, **Toggle Music** and **Quit**.

| Key         | Action                                               |
|-------------|------------------------------------------------------|
| Arrow keys  | Move the fighter                                     |
| Space       | Fire                                                 |
| Shift+Space | Fire a special barrage as well, if you have one left |
| Escape      | Pause, or resume a paused game                       |

While the game is paused you get **Resume**, **Restart**, **Toggle Music** and
**Quit**. When the game ends, **Restart** and **Toggle Music** are shown.

### Rules

- Your score goes up by one every tick (50 ms) you survive, and by ten for
  every enemy you destroy. An enemy takes three hits.
- A new enemy appears every second. Once you reach 1000 points, tougher
  enemies appear alongside them. They zig-zag diagonally and fire twice as
  often.
- Also from 1000 points on, every shot you fire is two bullets.
- You earn one special barrage for every 1000 points. A barrage fills the
  play field with three rows of bullets.
- You have three lives. Each enemy bullet that hits you costs one life. Flying
  into an enemy ends the game at once.

### Images and sound

Images are loaded from `resource/image/` (`bg.png`, `fighter.png`,
`enemy.png`, `advanced_enemy.png`, `bullet.png`, `special_bullet.png`,
`enemy_bullet.png`, `advanced_enemy_bullet.png`, `life.png`) and music from
`resource/sound/terran.mp3`, under the `--resources` directory. A missing
sprite is drawn as a coloured rectangle, a missing background leaves the
screen black, and missing music is simply not played. Sprite sizes, and so
the hit boxes, are taken from the images that were loaded.

## Using the game logic directly

The rules live in `skyraid.game.Game`, which needs no display. Drive a game
one tick at a time:

```python
import random

from skyraid.game import Direction, Game

game = Game(rng=random.Random(1))
game.start()
game.tick(held={Direction.LEFT})   # one 50 ms step with the left key held
game.fire(special=False)
game.spawn_enemy()
print(game.score, game.fighter.lives, len(game.enemies))
```

`Game` also has `toggle_pause()`, `resume()`, `restart()`,
`toggle_music()` and `check_collisions()`; `tick()` and `fire()` do nothing
unless the game is started and not paused. Sprite sizes can be given with
`skyraid.game.SpriteSizes`.

The sprites are `skyraid.bullet.Bullet`, `skyraid.enemy.Enemy`,
`skyraid.enemy.AdvancedEnemy` and `skyraid.fighter.Fighter`. For a plain
overlap test of two rectangles, use `skyraid.game.check_collision`.

## What it does not do

Scores are not saved between runs, and there are no levels or settings
beyond the two command-line options above.

## Running the tests

```
pip install ".[test]"
pytest
```