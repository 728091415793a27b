# sampleshifter

A command-line tool that finds audio sample files, sorts them into categories
and subcategories based on their file names, and copies them into an organized
folder tree. Source files are only read, never moved or changed. You can
preview the result before anything is copied.

## Installation

```
pip install .
```

This installs the `sample-shifter` command. Running `sample-shifter` with no
command prints the help text.

## Supported files

Directories are scanned recursively, in sorted order and without following
symbolic links, for files with these extensions (case does not matter):
`.wav`, `.mp3`, `.flac`, `.aif`, `.aiff`, `.ogg`, `.m4a`, `.wma`, `.aac`.

## Commands

### scan

Lists every audio file found under a directory:

```
sample-shifter scan ~/Samples
```

### preview

Shows where each file would go, grouped by category, followed by statistics
per category and subcategory. Nothing is copied.

```
sample-shifter preview ~/Samples --target ~/Organized
sample-shifter preview ~/Samples -t ~/Organized --normalize -o plan.json
```

Options:

- `-t`, `--target DIR`: target directory (required)
- `-o`, `--output FILE`: save the preview as JSON for use with `apply`
- `--normalize`: normalize file names (lowercase; spaces and underscores
  become dashes, runs of dashes collapse to one, leading and trailing dashes
  are dropped; the extension is kept)
- `-c`, `--config FILE`: category configuration file in JSON

### apply

Copies the files into `TARGET/<category>/<subcategory>/<file>`, creating
folders as needed. It works either from a source directory or from a preview
file saved earlier.

```
sample-shifter apply ~/Samples --target ~/Organized
sample-shifter apply --preview-file plan.json --target ~/Organized
sample-shifter apply ~/Samples -t ~/Organized --dry-run
```

Options:

- `-t`, `--target DIR`: target directory (required)
- `-p`, `--preview-file FILE`: use a saved preview instead of scanning
- `--dry-run`: show what would happen without copying
- `--normalize`: normalize file names
- `--clean`: delete the target directory before copying. You are asked to
  type `yes` to confirm; any other answer stops the command. With
  `--dry-run` nothing is deleted.
- `-c`, `--config FILE`: category configuration file in JSON

A file that fails to copy is reported and counted, and the remaining files
are still processed. After copying, a summary and the statistics tables are
printed.

Errors such as a missing directory, a missing `--target` or a bad
configuration file print a message and end the command with exit status 1.

## Categories

Categorization looks only at file names, not at the audio itself.

The built-in categories are checked in this order, and the first one with a
keyword in the (lowercased) file name wins: `oneshots`, `drums`, `bass`,
`percussion`, `vocals`, `synth`, `melodic`, `fx`, `transition`, `ambiance`,
`foley` and `loops`. Files that match nothing go to `uncategorized`.

Inside a category, the longest matching subcategory keyword decides the
subfolder, for example `drums/kick` or `bass/808`. A file in a category that
has subcategories but matches none of their keywords goes to
`<category>/uncategorized`.

## Custom configuration

Pass `--config` with a JSON file of this form to replace the built-in
categories:

```json
{
  "categories": [
    {
      "name": "drums",
      "priority": 1,
      "keywords": ["kick", "snare"],
      "subcategories": {
        "kick": ["kick", "bd"],
        "snare": ["snare", "sd"]
      }
    }
  ]
}
```

A lower `priority` number is checked first. The configuration needs at least
one category, and each category needs a unique, non-empty name and at least
one keyword. `subcategories` is optional; without it, files go straight into
`<category>/`.

## Using it from Python

```python
from sampleshifter.scanner import scan_directory
from sampleshifter.categorizer import categorizer_from_file
from sampleshifter.stats import format_stats

samples = scan_directory("Samples")
categorizer = categorizer_from_file("")  # an empty path uses the built-in configuration
files = categorizer.categorize_batch(samples, "Organized", normalize=True)
print(format_stats(files))
```

Other useful pieces: `sampleshifter.config.load_config` and `default_config`
(raising `ConfigError` on a bad file), `sampleshifter.categorizer.categorize`
and `normalize_file_name`, and `CategorizedFile.to_dict` with
`categorized_file_from_dict` for the preview file format.