import json
import logging
import os

log = logging.getLogger("davcloud")

"""
Reading of the configuration file used by ``get_davclient``.  The
file is json or yaml, a dict of sections:

    {
      "default": {"inherits": "work"},
      "work": {
        "cloud_url": "https://cloud.example.com/remote.php/dav/",
        "cloud_user": "alice",
        "cloud_pass": "hunter2"
      }
    }
"""


def config_section(config, section="default"):
    """
    Returns the keys of a section, with the keys of the section it
    inherits from as defaults.
    """
    if section in config and "inherits" in config[section]:
        ret = config_section(config, config[section]["inherits"])
    else:
        ret = {}
    if section in config:
        ret.update(config[section])
    return ret


def read_config(fn):
    """
    Returns the parsed configuration file, or {} if it is missing or
    broken.  Without a file name, the default locations are searched.
    """
    if not fn:
        cfgdir = f"{os.environ.get('HOME', '/')}/.config/"
        for config_file in (
            f"{cfgdir}/davcloud/cloud.conf",
            f"{cfgdir}/davcloud/cloud.yaml",
            f"{cfgdir}/davcloud/cloud.json",
            "/etc/davcloud/cloud.conf",
        ):
            cfg = read_config(config_file)
            if cfg:
                return cfg
        return {}

    try:
        try:
            with open(fn, "rb") as config_file:
                return json.load(config_file)
        except json.decoder.JSONDecodeError:
            ## Late import, wrapped in try/except.  yaml is an optional
            ## dependency, see the "yaml" extra.
            try:
                import yaml

                try:
                    with open(fn, "rb") as config_file:
                        return yaml.load(config_file, yaml.SafeLoader)
                except yaml.YAMLError:
                    log.error(
                        f"config file {fn} exists but is neither valid json nor yaml.  Check the syntax."
                    )
            except ImportError:
                log.error(
                    f"config file {fn} exists but is not valid json, and pyyaml is not installed."
                )

    except FileNotFoundError:
        log.info("no config file found at %s", fn)
    except ValueError:
        log.error("error in config file %s.  It will be ignored", fn, exc_info=True)
    return {}
