#!/usr/bin/env python3
"""
Configuration system for the numeric processing client
Supports YAML files, CLI overrides, and programmatic access
"""

import yaml
import argparse
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field
from copy import deepcopy


@dataclass
class ConsoleConfig:
	"""Console messages logging level configuration"""
	verbose: bool = False
	quiet: bool = False

	def to_dict(self) -> Dict[str, Any]:
		return {
			'verbose': self.verbose,
			'quiet': self.quiet
		}

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> 'ConsoleConfig':
		return cls(
			verbose=data.get('verbose', False),
			quiet=data.get('quiet', False)
		)


@dataclass
class InterfaceConfig:
	"""Terminal prompt settings"""
	prompt: str = "numproc> "
	show_banner: bool = True

	def to_dict(self) -> Dict[str, Any]:
		return {
			'prompt': self.prompt,
			'show_banner': self.show_banner
		}

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> 'InterfaceConfig':
		return cls(
			prompt=data.get('prompt', "numproc> "),
			show_banner=data.get('show_banner', True)
		)


@dataclass
class GenerationConfig:
	"""Number generation settings for the local request manager"""
	seed: Optional[int] = None  # None = fresh entropy every run
	decimal_places: int = 6

	def to_dict(self) -> Dict[str, Any]:
		return {
			'seed': self.seed,
			'decimal_places': self.decimal_places
		}

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> 'GenerationConfig':
		return cls(
			seed=data.get('seed'),
			decimal_places=data.get('decimal_places', 6)
		)


@dataclass
class WorkspaceConfig:
	"""Where relative file paths in commands are resolved"""
	base_dir: Optional[str] = None  # None = current directory

	def to_dict(self) -> Dict[str, Any]:
		return {
			'base_dir': self.base_dir
		}

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> 'WorkspaceConfig':
		return cls(
			base_dir=data.get('base_dir')
		)


@dataclass
class ClientConfig:
	"""Complete configuration for the numeric processing client"""
	console: ConsoleConfig = field(default_factory=ConsoleConfig)
	interface: InterfaceConfig = field(default_factory=InterfaceConfig)
	generation: GenerationConfig = field(default_factory=GenerationConfig)
	workspace: WorkspaceConfig = field(default_factory=WorkspaceConfig)

	# Metadata
	config_version: str = "1.0"
	description: str = "Numeric Processing Client Configuration"

	def to_dict(self) -> Dict[str, Any]:
		"""Convert to dictionary for YAML serialization"""
		return {
			'config_version': self.config_version,
			'description': self.description,
			'console': self.console.to_dict(),
			'interface': self.interface.to_dict(),
			'generation': self.generation.to_dict(),
			'workspace': self.workspace.to_dict(),
		}

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> 'ClientConfig':
		"""Create from dictionary (YAML loading); missing sections keep defaults"""
		config = cls()

		if 'config_version' in data:
			config.config_version = str(data['config_version'])
		if 'description' in data:
			config.description = data['description']

		if 'console' in data:
			config.console = ConsoleConfig.from_dict(data['console'] or {})
		if 'interface' in data:
			config.interface = InterfaceConfig.from_dict(data['interface'] or {})
		if 'generation' in data:
			config.generation = GenerationConfig.from_dict(data['generation'] or {})
		if 'workspace' in data:
			config.workspace = WorkspaceConfig.from_dict(data['workspace'] or {})

		return config


class ConfigurationManager:
	"""
	Manages configuration loading, merging, and validation
	"""

	def __init__(self, config_file: str = "numproc.yaml"):
		self.config_file = config_file
		self.config = None
		self.config_file_path = None

		self.logger = logging.getLogger(__name__)

		# Standard config file locations (in order of preference)
		self.config_search_paths = [
			Path.cwd() / "numproc.yaml",  # Current directory
			Path.cwd() / "config" / "numproc.yaml",  # Config subdirectory
			Path.home() / ".config" / "numproc" / "config.yaml",  # User config
			Path("/etc/numproc/config.yaml"),  # System config (Linux)
		]

	def load_config(self, config_file: Optional[str] = None) -> ClientConfig:
		"""
		Load configuration from file with fallback chain

		Args:
			config_file: Specific config file path, or None for auto-discovery

		Returns:
			Loaded configuration object (defaults if nothing was found)
		"""
		if config_file:
			config_path = Path(config_file)
			if config_path.exists():
				self.config = self._load_yaml_file(config_path)
				self.config_file_path = config_path
				self.logger.info(f"Loaded config from: {config_path}")
			else:
				self.logger.warning(f"Config file not found: {config_path}")
				self.logger.info("Using default configuration")
		else:
			for path in self.config_search_paths:
				if path.exists():
					self.config = self._load_yaml_file(path)
					self.config_file_path = path
					self.logger.info(f"Auto-discovered config: {path}")
					break
			else:
				self.logger.info("No config file found, using defaults")

		if self.config is None:
			self.config = ClientConfig()
		return self.config

	def _load_yaml_file(self, file_path: Path) -> ClientConfig:
		"""Load configuration from YAML file"""
		try:
			with open(file_path, 'r') as f:
				yaml_data = yaml.safe_load(f) or {}

			if not isinstance(yaml_data, dict):
				self.logger.error(f"Config file {file_path} does not contain a mapping")
				return ClientConfig()

			return ClientConfig.from_dict(yaml_data)

		except (OSError, yaml.YAMLError, AttributeError) as e:
			self.logger.error(f"Error loading config file {file_path}: {e}")
			return ClientConfig()

	def merge_cli_args(self, args: argparse.Namespace) -> ClientConfig:
		"""
		Merge CLI arguments into configuration (CLI takes precedence)

		Args:
			args: Parsed command line arguments

		Returns:
			Updated configuration
		"""
		if self.config is None:
			self.config = ClientConfig()

		# Console settings
		if getattr(args, 'verbose', False):
			self.config.console.verbose = True
		if getattr(args, 'quiet', False):
			self.config.console.quiet = True

		# Generation settings
		if getattr(args, 'seed', None) is not None:
			self.config.generation.seed = args.seed
		if getattr(args, 'decimal_places', None) is not None:
			self.config.generation.decimal_places = args.decimal_places

		# Workspace settings
		if getattr(args, 'base_dir', None):
			self.config.workspace.base_dir = args.base_dir

		# Interface settings
		if getattr(args, 'no_banner', False):
			self.config.interface.show_banner = False

		return self.config

	def save_config(self, file_path: Optional[str] = None) -> bool:
		"""
		Save current configuration to YAML file

		Args:
			file_path: Target file path, or None to use loaded file path

		Returns:
			True if saved successfully
		"""
		if file_path:
			target_path = Path(file_path)
		elif self.config_file_path:
			target_path = self.config_file_path
		else:
			target_path = Path(self.config_file)

		if self.config is None:
			self.config = ClientConfig()

		try:
			target_path.parent.mkdir(parents=True, exist_ok=True)

			with open(target_path, 'w') as f:
				f.write("# Numeric Processing Client Configuration\n")
				f.write("# Generated configuration file\n")
				f.write(f"# Version: {self.config.config_version}\n\n")

				yaml.dump(self.config.to_dict(), f,
						 default_flow_style=False,
						 sort_keys=False,
						 indent=2)

			self.logger.info(f"Configuration saved to: {target_path}")
			return True

		except OSError as e:
			self.logger.error(f"Error saving config to {target_path}: {e}")
			return False

	def create_sample_config(self, file_path: str = "numproc_sample.yaml") -> bool:
		"""Create a sample configuration file with comments"""
		try:
			with open(file_path, 'w') as f:
				f.write(self._generate_sample_yaml())

			self.logger.info(f"Sample configuration created: {file_path}")
			return True

		except OSError as e:
			self.logger.error(f"Error creating sample config: {e}")
			return False

	def _generate_sample_yaml(self) -> str:
		"""Generate sample YAML with comments"""
		return """# Numeric Processing Client Configuration File

# =============================================================================
# CONSOLE MESSAGES LOGGING LEVEL
# =============================================================================
console:
  verbose: false                  # Verbose output (debug detail)
  quiet: false                    # Quiet mode (warnings and errors only)

# =============================================================================
# TERMINAL INTERFACE
# =============================================================================
interface:
  prompt: "numproc> "             # Input prompt
  show_banner: true               # Print the welcome banner on start

# =============================================================================
# NUMBER GENERATION (local request manager)
# =============================================================================
generation:
  seed: null                      # Integer for reproducible output, null for random
  decimal_places: 6               # Digits after the point for decimal numbers

# =============================================================================
# WORKSPACE
# =============================================================================
workspace:
  base_dir: null                  # Directory for relative paths, null = current

# =============================================================================
# CONFIGURATION METADATA
# =============================================================================
config_version: "1.0"
description: "Numeric Processing Client Configuration"
"""

	def validate_config(self) -> tuple[bool, list[str]]:
		"""
		Validate configuration for common issues

		Returns:
			(is_valid, list_of_errors)
		"""
		errors = []

		if self.config.console.verbose and self.config.console.quiet:
			errors.append("Console cannot be both verbose and quiet")

		places = self.config.generation.decimal_places
		if not isinstance(places, int) or isinstance(places, bool) or not (0 <= places <= 15):
			errors.append(f"Invalid decimal_places: {places}. Must be between 0 and 15")

		seed = self.config.generation.seed
		if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool) or seed < 0):
			errors.append(f"Invalid seed: {seed}. Must be a non-negative integer")

		base_dir = self.config.workspace.base_dir
		if base_dir is not None and not Path(base_dir).expanduser().is_dir():
			errors.append(f"Workspace base_dir is not a directory: {base_dir}")

		if not isinstance(self.config.interface.prompt, str):
			errors.append("Interface prompt must be text")

		return len(errors) == 0, errors

	def get_config(self) -> ClientConfig:
		"""Get a copy of the current configuration"""
		return deepcopy(self.config)

	def update_config(self, updates: Dict[str, Any]) -> bool:
		"""
		Update configuration programmatically

		Args:
			updates: Dictionary of configuration updates in dot notation
					e.g., {"generation.seed": 42, "console.verbose": True}

		Returns:
			True if all updates applied successfully
		"""
		if self.config is None:
			self.config = ClientConfig()
		try:
			for key, value in updates.items():
				self._set_nested_attr(self.config, key, value)
			return True
		except AttributeError as e:
			self.logger.error(f"Error updating config: {e}")
			return False

	def _set_nested_attr(self, obj, attr_path: str, value):
		"""Set nested attribute using dot notation"""
		parts = attr_path.split('.')
		for part in parts[:-1]:
			obj = getattr(obj, part)
		if not hasattr(obj, parts[-1]):
			raise AttributeError(f"Unknown config key '{attr_path}'")
		setattr(obj, parts[-1], value)


def create_argument_parser():
	"""Argument parser for the numeric processing client"""
	parser = argparse.ArgumentParser(
		description='Numeric Processing Client',
		formatter_class=argparse.RawDescriptionHelpFormatter,
		epilog="""
Examples:
  %(prog)s                                   # Interactive prompt
  %(prog)s -e ping -e "echo hello"           # Run commands and exit
  %(prog)s -e 'generate "n.txt" 10 integer 0 9'
  %(prog)s --seed 42 --base-dir /tmp/work    # Reproducible, custom workspace
  %(prog)s -c my_config.yaml                 # Use specific config file
  %(prog)s --create-config sample.yaml       # Create sample config file

Configuration:
  Configuration is loaded in this order (later overrides earlier):
  1. Built-in defaults
  2. Configuration file (YAML)
  3. Command line arguments

  Config file search order:
  - numproc.yaml (current directory)
  - config/numproc.yaml
  - ~/.config/numproc/config.yaml
  - /etc/numproc/config.yaml
		"""
	)

	# Configuration file handling
	config_group = parser.add_argument_group('Configuration')
	config_group.add_argument(
		'-c', '--config',
		type=str,
		help='Configuration file path (YAML format)'
	)
	config_group.add_argument(
		'--create-config',
		type=str,
		metavar='FILE',
		help='Create sample configuration file and exit'
	)
	config_group.add_argument(
		'--save-config',
		type=str,
		metavar='FILE',
		help='Save current configuration to file'
	)

	# Command execution
	command_group = parser.add_argument_group('Commands')
	command_group.add_argument(
		'-e', '--execute',
		action='append',
		metavar='LINE',
		help='Run a command line and exit (repeatable)'
	)

	# Generation settings
	generation_group = parser.add_argument_group('Generation Settings')
	generation_group.add_argument(
		'--seed',
		type=int,
		help='Random seed for reproducible number generation'
	)
	generation_group.add_argument(
		'--decimal-places',
		type=int,
		help='Digits after the point for decimal numbers'
	)
	generation_group.add_argument(
		'--base-dir',
		type=str,
		metavar='DIR',
		help='Directory that relative file paths are resolved against'
	)

	# Output settings
	output_group = parser.add_argument_group('Output')
	output_group.add_argument(
		'-v', '--verbose',
		action='store_true',
		help='Verbose output'
	)
	output_group.add_argument(
		'-q', '--quiet',
		action='store_true',
		help='Only show warnings and errors'
	)
	output_group.add_argument(
		'--no-banner',
		action='store_true',
		help='Do not print the welcome banner'
	)

	return parser


def setup_configuration(argv=None) -> tuple[Optional[ClientConfig], Optional[int], Optional[ConfigurationManager], argparse.Namespace]:
	"""
	Setup configuration system with CLI integration

	Args:
		argv: Command line arguments (None for sys.argv)

	Returns:
		(config_object, exit_code, config_manager, parsed_args)
		exit_code is None when the program should keep running,
		0 when a special command finished, 1 on any failure
	"""
	parser = create_argument_parser()
	args = parser.parse_args(argv)

	# Handle special commands first
	if args.create_config:
		manager = ConfigurationManager()
		if not manager.create_sample_config(args.create_config):
			print(f"Error: could not create sample configuration: {args.create_config}")
			return None, 1, None, args
		print(f"Sample configuration created: {args.create_config}")
		print(f"Edit the file and run again with: -c {args.create_config}")
		return None, 0, None, args

	manager = ConfigurationManager()
	manager.load_config(args.config)

	# Merge CLI arguments (CLI overrides config file)
	config = manager.merge_cli_args(args)

	is_valid, errors = manager.validate_config()
	if not is_valid:
		print("Configuration errors:")
		for error in errors:
			print(f"  ✗ {error}")
		return None, 1, None, args

	if args.save_config:
		if manager.save_config(args.save_config):
			print(f"Configuration saved to: {args.save_config}")

	return config, None, manager, args
