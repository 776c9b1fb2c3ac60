from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict

from . import config
from .exceptions import (
    UnknownFieldError,
    TimestampFieldMissingError,
    TimestampFormatError,
)

@dataclass
class MediaRecord:
    """
    Metadata reported by exiftool for a single file.

    Field names are exiftool's own labels ("Camera Model Name", "Lens ID"...),
    which sometimes aggregate several EXIF/XMP/IPTC tags.
    """
    path: Path                      # absolute, existed when the record was built
    fields: Dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        txt = f"{self.path}:\n"
        for key, value in self.fields.items():
            txt += f"\t{key} = {value}\n"
        return txt

    def lookup(self, name: str) -> str:
        """Returns the raw value of an exiftool field."""
        try:
            return self.fields[name]
        except KeyError:
            raise UnknownFieldError(name) from None

    def get_lens(self) -> str:
        return self.lookup(config.LENS_FIELD)

    def get_camera(self) -> str:
        return self.lookup(config.CAMERA_FIELD)

    def get_date(self) -> datetime:
        """
        Returns the capture date of the file.

        Fields are checked in config.DATE_FIELDS order and only the first one
        present is parsed. Formats are tried from least to most precise.
        """
        date_str = None
        for name in config.DATE_FIELDS:
            if name in self.fields:
                date_str = self.fields[name]
                break

        if date_str is None:
            raise TimestampFieldMissingError(
                "Couldn't find " + " or ".join(config.DATE_FIELDS) + " exif data"
            )

        for fmt in config.DATE_FORMATS:
            try:
                return datetime.strptime(date_str, fmt)
            except ValueError:
                continue

        raise TimestampFormatError(date_str)

    def is_geotagged(self) -> bool:
        # Presence is enough, the value itself may be empty
        return config.GPS_FIELD in self.fields
