# agenda-imobiliaria

Builds the visit schedule for the appraisers of a real-estate agency.

The program reads the agency's brokers, clients and properties from
standard input. It deals the properties out in turns among the brokers who
are appraisers, in order of their ids. For each appraiser it then works out
a route. The route starts at the appraiser's own position and always goes
next to the nearest property not yet visited. Distance is the great-circle
distance from the haversine formula, with an Earth radius of 6371 km. When
two properties are equally near, the first one in the appraiser's list is
visited first.

The first visit starts at 09:00. Travel takes two minutes per kilometre,
and the minutes are truncated to a whole number. Each visit lasts one hour.
The hour is shown modulo 24.

## Installation

```
pip install .
```

## Usage

```
agenda-imobiliaria < entrada.txt
```

The command takes no options other than `-h`/`--help`.

### Input format

```
<number of brokers>
<phone> <appraiser> <latitude> <longitude> <full name>
...
<number of clients>
<phone> <full name>
...
<number of properties>
<type> <owner id> <latitude> <longitude> <price> <full address>
...
```

- Fields are separated by whitespace.
- The name and the address are read as the rest of their line, so they may contain spaces.
- `appraiser` is an integer. Any value other than 0 makes the broker an appraiser.
- Ids are given in reading order and start at 1, separately for brokers, clients and properties.
- Clients are read but play no part in the schedule.

### Output

For each appraiser, the program prints a block of lines:

```
Corretor 1
09:05 Imóvel 3
10:12 Imóvel 1
```

The blocks are separated by a blank line. If no broker is an appraiser,
the program prints `Nenhum avaliador disponível.` instead.

### Errors

Malformed or truncated input produces a message on standard error that
starts with `> `, and the command exits with status 1. A negative count is
also an error. When the problem is in one entry, the message names it, for
example `> Erro ao inicializar corretor n°2: ...`.

## As a library

```python
from agenda_imobiliaria.cli import executar, ler_entrada

print(executar(texto_de_entrada), end="")
corretores, clientes, imoveis = ler_entrada(texto_de_entrada)
```

Each module offers the following:

- `agenda_imobiliaria.agenda`
  - `haversine(lat1, lng1, lat2, lng2)` returns the distance in kilometres.
  - `imovel_mais_proximo(lat, lng, imoveis)` returns the nearest property. It raises `ValueError` when the list is empty.
  - `montar_agenda(corretores, imoveis)` returns a dict that maps each appraiser to the properties dealt to it.
  - `formatar_agenda(agenda)` renders the schedule text.
- `agenda_imobiliaria.entidades`
  - The classes `Corretor`, `Cliente` and `Imovel`. Each instance gets the next id of its own class.
  - `exibir_informacoes()` prints a description of the instance, and `str()` returns the same text.

## Limitations

The package keeps nothing between runs. All data comes from the input
text, and the only result is the printed schedule. It has no storage,
no editing of records and no interactive interface.

## Tests

```
pip install .[test]
pytest
```