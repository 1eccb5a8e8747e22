"""
Main entry point for the EduLedger service.
"""

import copy
import json
import logging
from typing import Any, Dict, Optional

from .api.rest_api import EduLedgerRestAPI
from .services import MockLedger


DEFAULT_CONFIG: Dict[str, Any] = {
    'log_level': 'INFO',
    'api_title': 'EduLedger API',
    'cors_origins': ['*'],
    'host': '0.0.0.0',
    'port': 8000,
}


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Defaults overlaid with the JSON file at ``path``, if given."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        with open(path, 'r') as f:
            config.update(json.load(f))
    return config


class EduLedgerPlatform:
    """Wires a ledger to its REST surface."""

    def __init__(self, config: Optional[dict] = None):
        self._config = copy.deepcopy(DEFAULT_CONFIG)
        self._config.update(copy.deepcopy(config or {}))

        logging.basicConfig(
            level=self._config['log_level'],
            format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )

        self._ledger = MockLedger()
        self._rest_api = EduLedgerRestAPI(
            self._ledger,
            title=self._config['api_title'],
            cors_origins=self._config['cors_origins']
        )
        print("✓ EduLedger platform initialized")

    @property
    def ledger(self) -> MockLedger:
        return self._ledger

    @property
    def app(self):
        return self._rest_api.app

    @property
    def config(self) -> Dict[str, Any]:
        return copy.deepcopy(self._config)

    def start_rest_server(self, host: Optional[str] = None, port: Optional[int] = None):
        """Serve the REST app until interrupted."""
        import uvicorn

        host = host or self._config['host']
        port = port or self._config['port']
        print(f"✓ REST server starting on {host}:{port}")
        print(f"  - API Docs: http://localhost:{port}/docs")
        uvicorn.run(self.app, host=host, port=port, log_level=self._config['log_level'].lower())

    def run_demo(self):
        """Walk through the certificate, scholarship and payment flows."""
        ledger = self._ledger

        print("\n=== Certificates ===")
        print(ledger.issue_certificate("student1", 101, "issuer1", 1672531200).to_dict())
        print(ledger.issue_certificate("student1", 101, "issuer1", 1672531200).to_dict())
        print(ledger.verify_certificate("student1", 101).to_dict())

        print("\n=== Scholarships ===")
        print(ledger.grant_scholarship("student1", 5000, 2000).to_dict())
        print(ledger.claim_scholarship("student1", 1999).to_dict())
        print(ledger.claim_scholarship("student1", 2000).to_dict())
        print(ledger.claim_scholarship("student1", 2000).to_dict())

        print("\n=== Course payments ===")
        print(ledger.register_course_payment(101, "student1", "tutor1", 1000).to_dict())
        print(ledger.mark_course_complete(101, "student1", "tutor2").to_dict())
        print(ledger.mark_course_complete(101, "student1", "tutor1").to_dict())
        print(ledger.mark_course_complete(101, "student1", "tutor1").to_dict())

        print("\n=== Statistics ===")
        print(ledger.get_statistics())
        print("\n✓ Demo completed")


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="EduLedger mock ledger service")
    parser.add_argument("--host", type=str, help="REST server host")
    parser.add_argument("--port", type=int, help="REST server port")
    parser.add_argument("--demo", action="store_true", help="Run demo mode")
    parser.add_argument("--config", type=str, help="Configuration file path")

    args = parser.parse_args()

    platform = EduLedgerPlatform(load_config(args.config))

    if args.demo:
        platform.run_demo()
    else:
        try:
            platform.start_rest_server(args.host, args.port)
        except KeyboardInterrupt:
            print("\nShutting down...")


if __name__ == "__main__":
    main()
