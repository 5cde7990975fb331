import argparse
import json
import sys

from precision_utility.core import run_pipeline
from precision_utility.PrecisionError import PrecisionError


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compute column-oriented precision of an anonymized dataset.")
    parser.add_argument('--config', type=str, default='config.yaml', help='Path to YAML config file')
    parser.add_argument('--output', type=str, default=None, help='Override output_path from config')

    args = parser.parse_args(argv)

    try:
        result = run_pipeline(config_path=args.config, output_path=args.output)
    except PrecisionError as e:
        print(json.dumps(e.to_dict()), file=sys.stderr)
        return 1
    except Exception as e:
        err = PrecisionError.from_exception(e, suggested_fix="Check the data, hierarchy and config files.")
        print(json.dumps(err.to_dict()), file=sys.stderr)
        return 1

    print(json.dumps(result.to_dict(), indent=2))
    return 0

if __name__ == "__main__":
    sys.exit(main())
