# routekit

Building blocks for an HTTP framework:

- `routekit.tree`: a radix-tree router with named parameters (`:name`),
  catch-all segments (`*path`) and trailing-slash recommendations;
- `routekit.caseinsensitive`: case-insensitive route lookup;
- `routekit.path` and `routekit.utils`: URL path cleaning, path joining,
  Accept-header parsing and other small helpers;
- `routekit.response_writer`: a response writer that tracks status and
  body size, and an in-memory `ResponseRecorder`;
- `routekit.logger`: an access-log line formatter with optional ANSI colours;
- `routekit.render`: renderers for JSON (plain, indented, secure, JSONP,
  ASCII, pure), XML, YAML, TOML, MessagePack, Protocol Buffers, Jinja2
  HTML templates, plain text, raw data, streams and redirects;
- `routekit.recovery`: helpers for writing reports about a caught failure;
- `routekit.mode`: the global running mode.

Install with `pip install .`; the test extra (`pip install .[test]`) adds
pytest and protobuf.

## Routing

```python
from routekit.tree import Node, Params

def show_user(ctx):
    ...

root = Node()
root.add_route("/users/:id", [show_user])
root.add_route("/static/*filepath", [show_user])

params = Params()
value = root.get_value("/users/42", params)
value.handlers        # [show_user]
value.full_path       # "/users/:id"
params.by_name("id")  # "42"
```

`get_value(path, params=None, unescape=False)` returns a `NodeValue` with
the matched handlers, the captured parameters (appended to `params` when
one is given), the registered full path and `tsr`, which is true when the
path would match with a trailing slash added or removed. With
`unescape=True` parameter values are query-unescaped (`+` becomes a
space, `%2F` becomes `/`); values holding malformed escapes are kept as
they are.

Conflicting routes raise `ValueError` at registration: two wildcards in
one segment, an unnamed wildcard, a catch-all that is not at the end or
not after a `/`, a parameter clashing with an existing wildcard, or a
path registered twice.

`Params` is a list of `Param(key, value)` tuples; `get(name)` returns the
value or `None`, `by_name(name)` returns the value or `""`. The helpers
`count_params`, `count_sections`, `find_wildcard` and
`longest_common_prefix` are also available.

```python
from routekit.caseinsensitive import find_case_insensitive_path

find_case_insensitive_path(root, "/USERS/42")          # "/users/42"
find_case_insensitive_path(root, "/USERS/42/", True)   # "/users/42"
```

It returns the path spelled as registered, or `None` if nothing matches;
the third argument also fixes a missing or extra trailing slash.

## Paths and helpers

```python
from routekit.path import clean_path
from routekit.utils import join_paths, parse_accept

clean_path("/abc/def/../ghi/./jkl//")   # "/abc/ghi/jkl/"
join_paths("/api/", "/users/")          # "/api/users/"
parse_accept("text/html, application/xml;q=0.9")  # ["text/html", "application/xml"]
```

`routekit.utils` also has `filter_flags`, `choose_data`, `last_char`,
`resolve_address` (the given address, else `:$PORT`, else `:8080`),
`is_ascii`, `name_of_function`, and `H`, a dict whose `to_xml()` writes
`<map>` with one element per key.

## Writing responses

`ResponseWriter` wraps any object offering `header`, `write_header` and
`write`, such as `ResponseRecorder`. It keeps the status until the first
write, counts the bytes written (`size`, `-1` before anything is sent)
and reports through `written` whether the response has started.

```python
from routekit.response_writer import ResponseRecorder, ResponseWriter

recorder = ResponseRecorder()
writer = ResponseWriter(recorder)
writer.write_header(201)
writer.write(b"created")
recorder.code   # 201
recorder.text   # "created"
```

`Headers` holds multi-valued headers with case-insensitive keys
(`get`, `set`, `add`).

## Rendering

Every renderer has `render(w)` and `write_content_type(w)`; a
Content-Type header is only set when none is present yet.

```python
from routekit.response_writer import ResponseRecorder
from routekit.render.jsonrender import JSON, SecureJSON
from routekit.render.text import String

w = ResponseRecorder()
JSON({"foo": "bar"}).render(w)                 # {"foo":"bar"}

w = ResponseRecorder()
SecureJSON("while(1);", [1, 2, 3]).render(w)   # while(1);[1,2,3]

w = ResponseRecorder()
String("hola %s %d", ["manu", 2]).render(w)    # hola manu 2
```

- JSON output has sorted keys and escapes `<`, `>` and `&` (except
  `PureJSON`, which leaves them and adds a newline); values that cannot
  be encoded raise `TypeError` or `ValueError`.
- `XML` writes objects with a `to_xml()` method, dataclasses, and
  strings, numbers and booleans; other values raise `TypeError`.
- `YAML` uses PyYAML, `TOML` uses tomli-w (data must be a mapping),
  `MsgPack` uses msgpack, `ProtoBuf` accepts any message with
  `SerializeToString()`.
- `HTMLProduction` renders a loaded `jinja2.Template` or
  `jinja2.Environment`; `HTMLDebug` reloads templates from `files` or a
  `glob` on every `instance()` call, with optional `Delims` and
  `func_map`.
- `Reader` copies a binary stream, with an optional Content-Length and
  extra headers; `Data` writes raw bytes.
- `Redirect(code, request, location)` sets `Location` and the status;
  codes outside 300–308 other than 201 raise `ValueError`.

## Logging

`routekit.logger.default_log_formatter` turns a `LogFormatterParams`
into one log line:

```
[ROUTEKIT] 2018/12/07 - 09:11:42 | 200 |            5s |     20.20.20.20 | GET      "/"
```

Colours follow the console colour mode: automatic (only when the
params' `is_term` is set), or fixed with `force_console_color()` and
`disable_console_color()`; `console_color_mode()` returns the current
one. `format_duration` renders latencies such as `5s` or `2743h29m3s`.

## Failure reports

`routekit.recovery` offers `stack(skip)` (a formatted call stack),
`source`, `function_name`, `time_format` and `mask_authorization`,
which replaces the value of an `Authorization` header in a dumped
request with `*`.

## Running mode

`routekit.mode.set_mode` accepts `"debug"`, `"release"` or `"test"`;
anything else raises `ValueError`. An empty value picks `"test"` while
running under pytest and `"debug"` otherwise. The initial mode is read
from the `ROUTEKIT_MODE` environment variable. `mode()` returns the
current one.

## What it does not do

routekit is a set of parts, not a running framework. It has no HTTP
server and no command to start one, no request context, no middleware
chain and no engine that ties the router to requests. The log formatter
builds lines but does not install itself as middleware, and the
recovery helpers format reports but do not catch failures on their own.
There is no request body binding or validation.