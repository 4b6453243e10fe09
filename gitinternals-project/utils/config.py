# What it does: Manages all read/write operations for the tool's own config file (~/.gitinternals or $GITINTERNALS_CONFIG)
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os

DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
DEFAULT_MERGED_MARKER = ' (merged)'


def get_config_path(): # Returns the path to the config file, honouring $GITINTERNALS_CONFIG
    return os.environ.get('GITINTERNALS_CONFIG') or os.path.join(os.path.expanduser('~'), '.gitinternals')


def read_config(): # Reads and returns the configuration as a ConfigParser object
    config_path = get_config_path()
    config = configparser.ConfigParser(interpolation=None)
    if os.path.exists(config_path):
        config.read(config_path)
    return config


def split_key(key): # "format.date_format" -> ("format", "date_format")
    section, _, option = key.partition('.')
    if not section or not option:
        raise ValueError(f"Invalid key format '{key}'. Should be 'section.key'.")
    return section, option


def write_config(key, value): # Sets a configuration key (section.option) to a value and writes it to the config file
    section, option = split_key(key)

    config_path = get_config_path()
    config = read_config()
    if not config.has_section(section):
        config.add_section(section)

    config.set(section, option, value)

    config_dir = os.path.dirname(config_path)
    if config_dir:
        os.makedirs(config_dir, exist_ok=True)
    with open(config_path, 'w') as configfile:
        config.write(configfile)


def get_key(key): # Value stored under "section.option", or None
    section, option = split_key(key)
    return get_option(section, option)


def get_option(section, option, fallback=None):
    return read_config().get(section, option, fallback=fallback)


def get_default_git_dir():
    return get_option('core', 'git_dir')


def get_display_settings(): # (date_format, merged_marker) used when printing people and log entries
    config = read_config()
    date_format = config.get('format', 'date_format', fallback=DEFAULT_DATE_FORMAT)
    merged_marker = config.get('format', 'merged_marker', fallback=DEFAULT_MERGED_MARKER)
    return date_format, merged_marker
