"""
Command line entry point
Look up the current host or an explicit address, show configuration status,
or run the HTTP server
"""

import sys
import json
import asyncio
import argparse
from typing import List, Optional

import colorama
from colorama import Fore, Style

from . import __version__
from .config.config_manager import get_config_manager
from .core.exceptions import ConfigurationError, ValidationError
from .core.models import EnrichedProfile
from .providers.catalog import PROVIDERS
from .service import IPInfoService
from .telemetry.remote_logger import RemoteLogger
from .utils.logging_config import setup_logging

EXIT_INVALID_INPUT = 2


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser"""
    parser = argparse.ArgumentParser(
        prog="ipinsight",
        description="Resolve an IP address to an enriched geolocation profile",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ipinsight                       # Profile for this host's public address
  ipinsight --ip 8.8.8.8          # Profile for a specific address
  ipinsight --ip 8.8.8.8 --json   # Raw JSON output
  ipinsight --status              # Show provider and telemetry configuration
  ipinsight --serve --port 3000   # Run the HTTP API
        """
    )

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("--ip", help="Address to look up (IPv4 or IPv6)")
    mode_group.add_argument("--self", dest="lookup_self", action="store_true",
                            help="Look up this host's public address (default)")
    mode_group.add_argument("--serve", action="store_true", help="Run the HTTP server")
    mode_group.add_argument("--status", action="store_true", help="Show configuration status")

    parser.add_argument("--json", action="store_true", help="Print the profile as JSON")
    parser.add_argument("--host", help="Server bind address")
    parser.add_argument("--port", type=int, help="Server port")
    parser.add_argument("--log-level", help="Logging level (default from LOG_LEVEL or INFO)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def print_profile(profile: EnrichedProfile):
    """Human readable profile summary"""
    source_color = Fore.YELLOW if profile.is_mock else Fore.GREEN
    print(f"\n{Fore.CYAN}🌐 IP PROFILE: {profile.ip} ({profile.version}){Style.RESET_ALL}")
    print("=" * 50)
    print(f"  Source:    {source_color}{profile.source.value}{Style.RESET_ALL}")
    print(f"  Location:  {profile.city}, {profile.region} ({profile.region_code}), "
          f"{profile.country_name} ({profile.country_code})")
    print(f"  Coords:    {profile.latitude}, {profile.longitude}")
    print(f"  Timezone:  {profile.timezone} (UTC{profile.utc_offset})")
    print(f"  Capital:   {profile.country_capital}")
    print(f"  Continent: {profile.continent_code}   EU: {'yes' if profile.in_eu else 'no'}")
    print(f"  Currency:  {profile.currency} ({profile.currency_name})")
    print(f"  Calling:   {profile.country_calling_code}   Languages: {profile.languages}")
    print(f"  Org:       {profile.org}")
    if profile.is_mock:
        print(f"\n{Fore.YELLOW}⚠️ Placeholder data: address is local or no provider answered{Style.RESET_ALL}")


async def show_status():
    """Show provider and telemetry configuration"""
    config = get_config_manager()
    provider_config = config.get_provider_config()

    print(f"\n📋 IPINSIGHT STATUS (v{__version__}):")
    print("=" * 50)

    print("\n🔍 GEOLOCATION PROVIDERS (in cascade order):")
    print("-" * 40)
    for name in config.get_provider_order():
        spec = PROVIDERS.get(name)
        if spec is None:
            print(f"  {name}: {Fore.RED}[UNKNOWN]{Style.RESET_ALL}")
        elif spec.requires_api_key and not provider_config.get('ipgeolocation_api_key'):
            print(f"  {name}: {Fore.YELLOW}[SKIPPED] no API key{Style.RESET_ALL}")
        else:
            print(f"  {name}: {Fore.GREEN}[OK]{Style.RESET_ALL}")
    print(f"  Timeout per call: {config.get_provider_timeout_ms()}ms")

    print("\n📡 REMOTE TELEMETRY:")
    print("-" * 40)
    telemetry = RemoteLogger(config)
    if not telemetry.enabled:
        print(f"  {Fore.YELLOW}[DISABLED]{Style.RESET_ALL} set LOG_SERVICE_URL and LOG_SERVICE_API_KEY")
    else:
        healthy = await telemetry.health_check()
        state = f"{Fore.GREEN}[HEALTHY]" if healthy else f"{Fore.RED}[UNREACHABLE]"
        print(f"  {telemetry.log_service_url}: {state}{Style.RESET_ALL}")
    await telemetry.close()


async def lookup(ip: Optional[str], as_json: bool) -> int:
    async with IPInfoService() as service:
        try:
            profile = await service.query(ip) if ip is not None else await service.resolve_self()
        except ValidationError as e:
            print(f"{Fore.RED}❌ {e.message}{Style.RESET_ALL}", file=sys.stderr)
            return EXIT_INVALID_INPUT

    if as_json:
        print(json.dumps(profile.to_dict(), ensure_ascii=False, indent=2))
    else:
        print_profile(profile)
    return 0


def run(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    colorama.init()

    try:
        config = get_config_manager()
    except ConfigurationError as e:
        print(f"{Fore.RED}❌ Configuration error: {e.message}{Style.RESET_ALL}", file=sys.stderr)
        return 1

    logging_config = config.get_logging_config()
    setup_logging(args.log_level or logging_config.get('level', 'INFO'), logging_config.get('file') or None)

    if args.serve:
        from .server import run_server
        server_config = config.get_server_config()
        run_server(args.host or server_config['host'], args.port or int(server_config['port']))
        return 0

    if args.status:
        asyncio.run(show_status())
        return 0

    return asyncio.run(lookup(args.ip, args.json))


if __name__ == "__main__":
    sys.exit(run())
