"""Profile Loader for loading generation profiles from YAML files."""

from pathlib import Path
from typing import Any

import yaml

from json_typegen.analysis.base import AnalysisOptions
from json_typegen.emitters.base import OutputFormat
from json_typegen.inputs.base import InputFormat
from json_typegen.profiles.base import GenerationProfile


class ProfileLoader:
    """Loads generation profiles from YAML files."""

    def load_file(self, path: Path | str) -> GenerationProfile:
        """Load a profile from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Loaded GenerationProfile instance
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Profile file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return self._parse_profile(data)

    def load_from_string(self, content: str) -> GenerationProfile:
        """Load a profile from a YAML string.

        Args:
            content: YAML content as string

        Returns:
            Loaded GenerationProfile instance
        """
        data = yaml.safe_load(content)
        return self._parse_profile(data)

    def _parse_profile(self, data: dict[str, Any] | None) -> GenerationProfile:
        """Parse profile data from YAML structure."""
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("Profile must be a YAML mapping")

        output_format_str = data.get("output_format", OutputFormat.INTERFACE.value)
        try:
            output_format = OutputFormat(output_format_str)
        except ValueError:
            valid = ", ".join(f.value for f in OutputFormat)
            raise ValueError(f"Unknown output format '{output_format_str}' (expected one of: {valid})") from None

        input_format = None
        input_format_str = data.get("input_format")
        if input_format_str is not None:
            try:
                input_format = InputFormat(str(input_format_str).lower())
            except ValueError:
                valid = ", ".join(f.value for f in InputFormat)
                raise ValueError(f"Unknown input format '{input_format_str}' (expected one of: {valid})") from None

        return GenerationProfile(
            name=data.get("name", "Root"),
            description=data.get("description", ""),
            output_format=output_format,
            input_format=input_format,
            options=AnalysisOptions.from_dict(data.get("options")),
        )

    def save_file(self, profile: GenerationProfile, path: Path | str) -> None:
        """Save a profile to a YAML file.

        Args:
            profile: The profile to save
            path: Path for the output file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = self._profile_to_dict(profile)

        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    def _profile_to_dict(self, profile: GenerationProfile) -> dict[str, Any]:
        """Convert a GenerationProfile to a dictionary for YAML serialization."""
        data: dict[str, Any] = {
            "name": profile.name,
            "description": profile.description,
            "output_format": profile.output_format.value,
        }
        if profile.input_format is not None:
            data["input_format"] = profile.input_format.value
        data["options"] = profile.options.model_dump()
        return data


def load_profile(path: Path | str) -> GenerationProfile:
    """Convenience function to load a profile from a file.

    Args:
        path: Path to the YAML file

    Returns:
        Loaded GenerationProfile instance
    """
    loader = ProfileLoader()
    return loader.load_file(path)
