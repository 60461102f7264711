# deskbot

deskbot holds the pieces of a small personal chat bot that runs on your own
computer: the Telegram data types, reply keyboards, the logic that answers chat
text (fun keywords, Futurama quotes, owner-only PC commands), and a background
watcher that notices sustained high CPU load.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Answering chat text

`deskbot.processing.MessageProcessor` takes a `send(chat_id, text)` callable and
the username of the owner. Feed it each incoming text with
`process_new_message(user, text)`:

```python
from deskbot.processing import MessageProcessor
from deskbot.users import User

def send(chat_id, text):
    print(chat_id, text)

processor = MessageProcessor(send, owner_username="owner")
processor.process_new_message(User(id=1, firstname="Ada", username="owner"), "hi")
# prints: 1 Oh, hi Ada
```

Text is matched in lower case and must equal a keyword exactly.

Fun keywords, open to anyone:

- `hello` / `hi`
- `q` / `quote`: a random line from the quote file
- `fuck you`
- `you up` / `u up` (with or without `?`)
- `did you hit her?`

PC keywords, for the owner only:

- `cpu`: current CPU usage in percent
- `cores`: number of logical cores
- `lock`, `block`, `unblock`: run the `lock_pc`, `block_input` and
  `unblock_input` callables given to the processor
- `quit`: says goodbye and raises `SystemExit(0)`

Text starting with `help` or `halp` answers with help; `help fun` and `help pc`
give the keyword lists. Anything else gets "I'm sorry <name>, I'm afraid I can't
do that".

The first message from the owner's username logs that chat in
(`is_logged_in()`, `my_chat_id`). PC keywords from any other chat are refused
with a "magic word" reply.

The processor's collaborators can all be replaced through keyword arguments:
`quotes`, `cpu_load`, `cpu_count`, `lock_pc`, `block_input`, `unblock_input` and
`sleep`. By default `lock_pc`, `block_input` and `unblock_input` report failure,
so those keywords answer with the error message.

## Quotes

`deskbot.quotes.QuoteBook` reads `FuturamaQuotes.txt` from the working directory
(or another path), one quote per line, and `random_quote()` picks one. Without
the file it returns a single built-in line.

## CPU load and the watcher

`deskbot.sysutil.get_cpu_load()` returns the CPU load since the previous call as
a fraction between 0.0 and 1.0, or -1.0 when the counters cannot be read.
`CpuLoadCalculator` does the same arithmetic on tick counts you supply.

`deskbot.cpu_watcher.CPUWatcher` samples the load on a daemon thread, calls
`on_high` once the load has stayed above the high threshold for the configured
time, then `on_low` once it has stayed below the low threshold, and starts over:

```python
from deskbot.cpu_watcher import CPUWatcher, CPUWatcherConfig

watcher = CPUWatcher(
    CPUWatcherConfig(high_threshold=80, high_duration=10, low_threshold=20, low_duration=2),
    on_high=lambda: print("High CPU usage detected"),
    on_low=lambda: print("Low CPU usage restored"),
)
watcher.start_monitoring()
...
watcher.stop_monitoring()
```

`deskbot.timer.Stopwatch` measures elapsed milliseconds or nanoseconds.

## Telegram types and reply markup

`deskbot.message` has `Message`, `CallbackQuery` and `Update`, each built with
`from_json(data)` from a decoded Telegram object. `deskbot.users` has `User`,
`Chat` and `ChatType`; `deskbot.media` has `PhotoSize`, `Audio`, `Document`,
`Sticker`, `Video`, `Voice`, `Contact`, `Location` and `File`. Message dates are
read as milliseconds since the epoch.

`deskbot.replies` has `ReplyKeyboardMarkup`, `InlineKeyboardMarkup` with
`InlineKeyboardButton`, `ForceReply`, `ReplyKeyboardRemove` and
`ReplyKeyboardHide`. `serialize()` gives compact JSON with sorted keys.

## What it does not do

deskbot does not talk to Telegram over the network: there is no HTTP client, no
update polling and no command registration, and there is no command that starts
a bot. To run one, fetch updates yourself, build `Message` objects with
`Message.from_json`, pass their text to a `MessageProcessor`, and deliver what
its `send` callable receives.