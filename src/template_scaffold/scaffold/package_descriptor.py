"""Reading and rewriting the scaffold's package.json."""

import json
import os

PACKAGE_DESCRIPTOR = "package.json"


def rename_package(root, name) -> bool:
    """Set the name field of root/package.json, if the file exists.

    The file is rewritten with 2-space indentation and one trailing
    newline; the order of the other fields is preserved.

    Returns:
        True if a descriptor was found and rewritten.

    Raises:
        OSError: If the file cannot be read or written.
        ValueError: If the file is not valid JSON or its top level is not
            an object.
    """
    descriptor_path = os.path.join(root, PACKAGE_DESCRIPTOR)
    if not os.path.isfile(descriptor_path):
        return False

    with open(descriptor_path, encoding="utf-8") as f:
        package = json.load(f)

    if not isinstance(package, dict):
        raise ValueError(f"{PACKAGE_DESCRIPTOR} is not a JSON object")
    package["name"] = name

    with open(descriptor_path, "w", encoding="utf-8") as f:
        f.write(json.dumps(package, indent=2, ensure_ascii=False) + "\n")
    return True
