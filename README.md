# tourbot

Building blocks for a robot that leads visitors through a tour of points of
interest (PoIs): the tour data model and its JSON storage, a scheduler that
tracks the current PoI, an integer blackboard, a preemptible navigation goal
server, and behaviour-tree leaves that ask skills for their result on every
tick. Everything is plain Python with no third-party dependencies.

## Tour data

Tours are kept in a JSON file that maps tour names to tours:

```json
{
  "museum": {
    "m_availablePoIs": {
      "it-IT": {
        "entrance": {
          "m_name": "entrance",
          "m_availableActions": {
            "welcome": [
              {"m_type": "speak", "m_isBlocking": true, "m_param": "Benvenuti"}
            ]
          }
        }
      }
    },
    "m_activeTourPoIs": ["entrance"]
  }
}
```

- `tourbot.actions` — `ActionType` (`SPEAK`, `DANCE`, `SIGNAL`, and
  `INVALID` for any unknown `m_type`) and the frozen dataclass `Action`
  (`type`, `is_blocking`, `param`).
- `tourbot.poi` — `PoI`, a named point of interest mapping commands to lists
  of actions: `is_command_valid`, `get_actions` (raises `KeyError` for an
  unknown command), `available_commands`, and `command_multiples_num`, which
  counts the commands that contain the given text.
- `tourbot.tour` — `Tour`, the PoIs per language plus the ordered list of
  active PoI names (`active_tour_pois`). `available_languages`,
  `language_supported`, `set_current_language` (raises `ValueError` for an
  unavailable language) and `get_poi(poi_name, lang=None)` (raises
  `KeyError`; uses the current language, `it-IT` by default, when `lang` is
  not given). The current language is not stored in the file.
- `tourbot.tour_storage` — `read_json_file`, `write_json_file` (four-space
  indent) and `TourStorage.load_tour(path, tour_name)`, which keeps and
  returns the named tour in `TourStorage.tour`. It raises `TourLoadError`
  when the path is empty, the file cannot be read or is empty, it does not
  hold an object of tours, a tour is malformed, or the named tour is absent.

`Action`, `PoI` and `Tour` convert to and from plain dictionaries with
`from_dict` and `to_dict`, using the key names shown above; `from_dict`
raises `ValueError` on missing keys or wrong types.

```python
from tourbot.tour_storage import TourStorage

storage = TourStorage()
tour = storage.load_tour("tours.json", "museum")
poi = tour.get_poi("entrance")
actions = poi.get_actions("welcome")
```

## Scheduler

`tourbot.scheduler.SchedulerComponent` wraps a `TourStorage` and keeps the
index of the current PoI. `SchedulerComponent.from_args([path, tour_name])`
loads the tour (raising `ValueError` if either argument is missing).
`set_poi(n)` stores `n` modulo the number of active PoIs and returns the new
index (`ValueError` if the tour has none); `get_current_poi()` returns it.

## Blackboard

`tourbot.blackboard.BlackboardComponent` is a thread-safe store of integers
keyed by `field_key(field_name)`, i.e. `"PoiDone<field_name>"`. `set_int`
stores or overwrites a value and ignores an empty field name; `get_int`
returns it and raises `KeyError` when the field is missing or unnamed.

## Navigation

`tourbot.navigation.NavigationComponent(navigator, period=1.0)` drives any
object offering `goto_target_by_location_name(name)`, `stop_navigation()`
and `get_navigation_status()` to the location `poi_location_name(n)`
(`"sim_gam_<n>"`).

- `handle_goal(poi_number)` returns a `GoalResponse`; `handle_cancel`
  always returns `CancelResponse.ACCEPT`.
- `handle_accepted(goal_handle)` aborts a running goal that is not being
  canceled, makes the new one active and runs `execute` on a background
  thread, which it returns.
- `execute` re-sends the target when the status is idle or aborted, records
  each status on the `GoalHandle` (`feedback`), and finishes the goal as
  succeeded on `GOAL_REACHED`, canceled after `request_cancel()`, or aborted
  when the target cannot be sent. `close()` stops it without a result.
- `convert_status` maps a `NavigationStatus`, its name, or a
  `navigation_status_<name>` string to `NavigationStatus`; anything else is
  `ERROR`.
- `NavigationClientConfig.from_mapping(group)` reads the navigation client
  settings (`device`, `local-suffix`, `navigation_server`,
  `map_locations_server`, `localization_server`); `to_properties()` returns
  them as a dictionary.

## Behaviour-tree leaves

`tourbot.bt_nodes` provides:

- `SkillAction(name, ports, send_tick, send_halt)` and
  `SkillCondition(name, ports, send_tick)`. `ports` must contain
  `isMonitored`; when it is `"true"` the service names get a `_mon` suffix
  (`"<name>Skill/tick"`, `"<name>Skill/halt"`). `send_tick(service)` returns
  a `SkillStatus` code or `None`, which counts as failure. `tick()` returns a
  `NodeStatus`; a condition succeeds only on `SkillStatus.SUCCESS`.
  `SkillAction.halt()` calls `send_halt(service)` until it returns true and
  returns the number of attempts.
- `FlipFlopCondition(name, period=30)` — succeeds `period` times, then fails
  once and starts over.
- `AlwaysRunning` — always `RUNNING`; `halt()` increments `halt_count`.
- `provided_ports()` — the input ports `("interface", "isMonitored")`.

## What the package does not do

There is no command-line program and no messaging transport: components are
in-process objects, and the service calls made by the behaviour-tree leaves
and the navigator are supplied by the caller as callables or objects. There
is no behaviour-tree engine or XML tree loader, and no battery, timer, alarm,
clock or people-detection components.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.