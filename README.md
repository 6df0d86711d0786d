# chargefield

An interactive two-dimensional electric field simulator. Point charges sit on
a plane, the field they produce is drawn as a grid of arrows, and a movable
sensor reports the field strength and direction at its position.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
chargefield
```

This opens a resizable pygame window. It starts with no charges; add them
from the menu.

Options:

- `--width` and `--height`: window size in pixels (default 1280 x 720).
- `--font`: path of a TrueType font; pygame's built-in font is used otherwise.

The same entry point is available as `python -m chargefield.app`.

### Controls

- **Escape**: show or hide the menu.
- **Up / Down**: open the menu, then move the highlighted entry, wrapping
  around at either end.
- **Enter** or **left click**: choose the highlighted menu entry.
- **Left drag**: move a charge, or the sensor when it is active (the sensor
  takes priority when both are under the cursor).
- **Mouse wheel** over a charge: change its value by 0.25 C per scroll step,
  limited to the range -5 C to +5 C.

The menu entries are: Continue simulation, Add positive charge, Add negative
charge (each added at a random spot within ±0.8 of the centre), Clear
charges, Exit, and Toggle sensor.

## Using it as a library

The physics and input logic work without a display:

```python
from chargefield.field import ElectricField
from chargefield.sensor import Sensor

field = ElectricField()
field.add_charge(0.5, 0.0, 1.0)
field.add_charge(-0.5, 0.0, -1.0)

ex, ey = field.field_at(0.0, 0.0)

sensor = Sensor()
sensor.update_field_vector(field)
print(sensor.readout())
```

- `chargefield.field`: `ElectricCharge` and `ElectricField`. The field uses
  k = 1 and ignores any charge closer than 0.1 to the point being evaluated.
  `find_charge_at` returns an index or `None`.
- `chargefield.geometry`: `screen_to_world`, `world_to_screen`,
  `world_bounds`, the model shapes `arrow_vertices` and `circle_vertices`,
  the example fields `rotational_field` and `cosine_field`, and `field_grid`,
  which builds a list of `FieldArrow` over the window with logarithmically
  scaled lengths.
- `chargefield.sensor`: `Sensor`, with its magnitude, direction, arrow length
  and a three-line text `readout()`.
- `chargefield.menu`: `Menu` and `MenuItem`, with hover, click and keyboard
  handling; `Key`, `MouseButton` and `Action` name the input events.
- `chargefield.rendering`: `TextRenderer`, `ChargeRenderer`,
  `SensorRenderer` and `draw_shape`, which draw onto a pygame surface.
- `chargefield.app`: `Simulation`, which holds the state and reacts to input
  events, and `run`, the window loop.

## Limitations

The simulation is static electrostatics only: charges do not move on their
own and nothing is saved between runs.