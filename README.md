# rested

`rested` is an interactive REST client for the terminal. You build a request
from menus (method, URL, headers, body), send it and read the response. Requests
you want to keep can be saved in named collections, which live in a JSON file
in the current directory. It needs nothing beyond the Python standard library.

## Installation

```
pip install .
```

## Usage

```
rested
```

`rested interactive` starts the same program. The `-t/--toggle` flag is
accepted and has no effect.

Menus are numbered lists. Answer with the number of an entry, or type the
entry's text exactly; anything else asks again.

The main menu (**Select Action**) offers:

- **New request**: opens the request editor on an empty request.
- **Open collection**: lists your collections, followed by
  **+ New collection** (asks for a name, which may not be empty) and **Back**.
  Picking a collection lists its requests as `METHOD - name`; picking one opens
  it in the request editor.
- **Exit**: saves the data file and quits.

The request editor is titled with the request's name, or "New request" while it
has none. It offers:

- **Send request**: sends the request and prints the status line, the response
  headers and the body. Error statuses such as 404 or 500 are shown like any
  other response. An empty method is sent as `GET`.
- **Set request name**, **Set method** (`GET`, `POST`, `PUT`, `PATCH`,
  `DELETE`), **Set request URL**.
- **Set headers**: asks for one header name and its value and adds it,
  replacing any header of the same name. An empty name adds nothing.
- **Set body**: opens the current body in a temporary file in `$EDITOR`, or
  `nano` if it is not set. When the editor exits successfully the file's text,
  with leading and trailing whitespace stripped, becomes the body.
- **Save to collection**: appends a copy of the request to a collection you
  pick. The request needs a name, and at least one collection must exist.
- **Back**: leaves the editor.

A request opened from a collection is edited as a copy: the saved entry does
not change unless you save the edited request to a collection again, which adds
it as a new entry.

## Data file

Collections are stored in `rested_data.json` in the working directory. If the
file does not exist, `rested` starts with no collections and creates the file
when it saves. If the file cannot be read or is not valid JSON, `rested` prints
the error and exits with status 1.

The data is saved when you choose **Exit**, and also when input ends or you
press Ctrl+C at a prompt, or the process receives SIGTERM.

The file is indented JSON:

```json
{
  "collections": [
    {
      "title": "Example API",
      "requests": [
        {
          "method": "GET",
          "url": "https://api.example.com/items",
          "headers": {"Accept": "application/json"},
          "body": "",
          "requestName": "List items"
        }
      ]
    }
  ]
}
```

## Using it from Python

`rested.storage` holds the data model: the dataclasses `RestedRequest`,
`Collection` and `Database`, each with `to_dict()` and `from_dict()`, plus
`Database.load(path)` and `Database.save(path)`, which raise `StorageError` on
failure.

```python
from rested.storage import Collection, Database, RestedRequest

db = Database.load("rested_data.json")
db.collections.append(
    Collection(
        title="Example API",
        requests=[RestedRequest(method="GET", url="https://api.example.com/items",
                                request_name="List items")],
    )
)
db.save("rested_data.json")
```

`rested.request_editor.send_request(request, timeout=None)` sends a
`RestedRequest` and returns an `HttpResponse` (`status`, `reason`, `headers`,
`body`, `status_line`); `format_response(response)` renders it as the text the
editor prints.

`rested.app.run(db_path, prompter)` runs the menus against any data file and
returns an exit status. A `rested.prompts.Prompter` takes an input function and
an output stream, so the menus can be driven by scripted answers.

## Limitations

- There is no non-interactive mode: requests are sent only from the editor
  menu or from Python.
- Headers can be added or replaced but not removed, and saved requests cannot
  be deleted or renamed from the menus.
- The command always uses `rested_data.json` in the working directory.
- A URL that cannot be used or a server that cannot be reached while sending
  from the editor ends the program with an error, without saving.

## Running the tests

```
pip install ".[test]"
pytest
```