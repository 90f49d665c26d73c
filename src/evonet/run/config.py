import configparser
import os

class Config:

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create an empty Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates an empty Config for manual attribute setting.
        """
        if config_file is None:
            # Empty config for testing/manual setup
            self.num_inputs  = None
            self.num_outputs = None
            self.activation  = None
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser(inline_comment_prefixes=('#', ';'))
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [NETWORK]

        # The number of sensor (input) nodes, through which the network receives inputs.
        # The first 'num_inputs' nodes of a decoded network (in ascending ID order) are sensors.
        self.num_inputs = get_value('NETWORK', 'num_inputs', int)

        # The number of output nodes, to which the network delivers outputs.
        # They immediately follow the sensor nodes in ascending ID order.
        self.num_outputs = get_value('NETWORK', 'num_outputs', int)

        # The activation function assigned to nodes that do not name their own.
        # For the list of all available choices, see the 'activations' package.
        self.activation = get_value('NETWORK', 'activation', str, default=None)

        for key in ('num_inputs', 'num_outputs'):
            value = getattr(self, key)
            if value is None or value <= 0:
                raise ValueError(f"'{key}' must be a positive integer, got {value}")
