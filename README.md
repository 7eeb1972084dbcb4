# sahnekit

`sahnekit` is a collection of small, self-contained tools for two jobs:

* **Reading and writing files in everyday formats**: plain text, RTF, TOML, YAML,
  XML, SVG, binary STL, PCM WAV, WebM headers, simple `key = value` files, JSON
  lists of string records, comma-separated sheets, zip-based VSDX packages, and
  quick scans of source files.
* **Filesystem bookkeeping and simulated storage**: a free-space bitmap manager,
  a superblock record, an in-memory SSD, file-backed HDD and SAS devices, and a
  logger that tags each line with a drive type.

It needs Python 3.11 or later. The only runtime dependency is PyYAML.

## Installation

```
pip install sahnekit
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "sahnekit[test]"
pytest
```

## File formats

| Module                | What it handles                                                       |
|-----------------------|-----------------------------------------------------------------------|
| `sahnekit.txt`        | `TxtFile`: `read_lines` (non-empty lines), `write_lines`, `append_line` |
| `sahnekit.rtf`        | `parse_rtf`, `RtfFile.from_file`: text with control words removed     |
| `sahnekit.tomlfile`   | `TomlFile.load`, `get_string`, `get_integer` for top-level keys       |
| `sahnekit.yamlfile`   | `YamlFile.load_from_file`, `get_value(key, expected_type)`            |
| `sahnekit.xmlfile`    | `XmlFile.from_string`, `XmlFile.read_from_file`, `XmlNode` trees      |
| `sahnekit.svg`        | `Svg.from_str`, `Svg.from_file`; `SvgRect` and `SvgCircle` elements   |
| `sahnekit.stl`        | binary STL: `Stl.from_bytes`, `Stl.from_file`, `Triangle`             |
| `sahnekit.wav`        | PCM WAV: `WavHeader.read`, `WavHeader.write`, `read_wav_data`, `write_wav_data` |
| `sahnekit.webm`       | `WebM.parse`: checks the EBML and Segment header IDs                  |
| `sahnekit.scala`      | `ScalaFile`: `key = value` files with `load`, `save`, `get`, `set`    |
| `sahnekit.swift`      | `SwiftData`, `write_swift_data`, `read_swift_data`: JSON string maps  |
| `sahnekit.xlsx`       | `parse_xlsx`, `XlsxFile.read`: comma-separated rows, parsed once      |
| `sahnekit.vsdx`       | `VsdxFile`: `get_file` for members, `read` at an offset of the first member |
| `sahnekit.rar`        | `extract_rar`: creates the output directory and probes the archive    |
| `sahnekit.ruby`       | `read_ruby_file`, `parse_ruby_lines`: whitespace-split words          |
| `sahnekit.rustsrc`    | `find_function_definitions`, `process_rust_file`: lines starting `fn ` |
| `sahnekit.typescript` | `TypeScriptFile`: a 1 MiB size check plus line and character counts   |

A few examples:

```python
from sahnekit.txt import TxtFile
from sahnekit.scala import ScalaFile
from sahnekit.xmlfile import XmlFile

notes = TxtFile("notes.txt")
notes.write_lines(["first", "second"])
notes.append_line("third")
print(notes.read_lines())          # ['first', 'second', 'third']

settings = ScalaFile()
settings.set("name", "John Doe")
settings.save("settings.scala")
print(ScalaFile.load("settings.scala").get("name"))   # 'John Doe'

doc = XmlFile.from_string("<root><child a='1'>Text</child></root>")
print(doc.root.children[0].text)   # 'Text'
```

Malformed input raises an exception from the module concerned, such as
`TomlFileError`, `YamlFileError`, `XmlError`, `SvgError`, `WavError` or
`WebmError`; `Stl.from_bytes` and `read_swift_data` raise `ValueError`, and
a WAV stream that ends early raises `EOFError`. Missing files raise the usual
`OSError` subclasses.

## Storage and filesystem pieces

| Module                 | What it provides                                                    |
|------------------------|---------------------------------------------------------------------|
| `sahnekit.freespace`   | `FreeSpaceManager` bitmap and a per-device `DeviceManager`          |
| `sahnekit.superblock`  | `Superblock` with `is_valid`, `size` and free-count updates; `DeviceType` |
| `sahnekit.ssd`         | `SSD`: an in-memory block device                                    |
| `sahnekit.hdd`         | `HDD`: a block device backed by an image file, created if missing   |
| `sahnekit.sas`         | `SasDevice`: block reads and writes on an existing image file       |
| `sahnekit.drivelog`    | `Logger` with `LogLevel` filtering and a `DriveType` tag            |

```python
from sahnekit.freespace import DeviceManager

devices = DeviceManager()
devices.add_device("hdd", 1024, 4096)
device, block = devices.allocate_block("hdd")   # ('hdd', 0)
devices.deallocate_block(device, block)
print(devices.is_block_free(device, block))     # True
```

Block devices check block IDs and data sizes and raise their own errors when
a request does not fit: `InvalidBlockId` and `InvalidBufferSize` (both
`SsdError`) for the SSD, `BlockSizeError` and `BlockDeviceError` for the HDD,
and `OpenError`, `SeekError`, `ReadError` and `WriteError` (all
`SasDeviceError`) for the SAS device. `HDD`, `SasDevice`, `Logger` and
`VsdxFile` can be used as context managers.

`Logger` lines look like `[2024-01-31 12:00:00] INFO (HDD) message`; messages
below the logger's level are not written, and `log` returns whether the line
was written.

## Command-line tools

Four small commands come with the package:

```
sahnekit-typescript example.ts   # size check, then line and character counts
sahnekit-svg example.svg         # print the width, height and shapes of an SVG
sahnekit-wav example.wav         # write one second of silent 16-bit stereo 44.1 kHz audio and read it back
sahnekit-drivelog logs/          # write one sample entry to each of four per-drive log files
```

Without an argument, `sahnekit-typescript` reads `example.ts`, `sahnekit-svg`
reads `/example.svg`, `sahnekit-wav` writes `example.wav`, and
`sahnekit-drivelog` writes `hdd_logfile.log`, `ssd_logfile.log`,
`usb_logfile.log` and `nvme_logfile.log` to the current directory.

## What it does not do

* `extract_rar` does not unpack RAR archives. It creates the output
  directory, opens the archive, reads at most its first 512 bytes and returns
  how many were read; no members are written out.
* `VsdxFile` is read-only: `write` always raises.
* `parse_xlsx` does not read real spreadsheet (zip/XML) files; it treats the
  bytes as comma-separated text.
* The storage pieces are separate building blocks. There is no file system
  that ties the superblock, free-space manager and block devices together, so
  there is no way to create, read or write files on a simulated device, and
  nothing talks to real hardware.