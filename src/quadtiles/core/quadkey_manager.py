import argparse
import logging
from typing import Dict, List, Optional

from quadtiles.services.config_service import ConfigService
from quadtiles.services.quadkey_service import QuadKeyService
from quadtiles.infrastructure.logging import LoggingManager
from quadtiles.exceptions.quadkey_exceptions import QuadKeyException

logger = logging.getLogger(__name__)


class QuadKeyManager:
    """Main manager class for quadkey conversion operations"""

    def __init__(self, config_path: Optional[str] = None):
        self.config_service = ConfigService()
        if config_path:
            self.config = self.config_service.load_config(config_path)
        else:
            self.config = self.config_service.default_config()
        self.settings = self.config_service.get_settings(self.config)
        self.quadkey_service = QuadKeyService(self.settings)

    def use_truncation(self) -> None:
        """Silently drop high-order bits of out-of-range coordinates"""
        self.settings.out_of_range = 'truncate'

    def encode_tile(self, x: int, y: int, z: int) -> str:
        quadkey = self.quadkey_service.encode(x, y, z)
        logger.debug("Encoded tile (%d, %d, %d) as %r", x, y, z, quadkey)
        return quadkey

    def decode_key(self, quadkey: str) -> Dict[str, int]:
        tile = self.quadkey_service.decode(quadkey)
        logger.debug("Decoded %r as %s", quadkey, tile)
        return tile.to_dict()

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        """Build command-line argument parser"""
        parser = argparse.ArgumentParser(
            prog='quadtiles',
            description='Convert map tiles between x/y/zoom coordinates and quadkeys.',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=(
                'Examples:\n\n'
                '  quadtiles --tile 3 5 3        # prints 213\n'
                '  quadtiles --key 213           # prints 3 5 3\n'
                '  quadtiles --parent 032        # prints 03\n'
                '  quadtiles --children 03       # prints 030 031 032 033\n'
            )
        )
        group = parser.add_mutually_exclusive_group(required=True)
        group.add_argument('--tile', nargs=3, type=int, metavar=('X', 'Y', 'Z'),
                           help='Tile coordinates to encode as a quadkey')
        group.add_argument('--key', help='Quadkey to decode into tile coordinates')
        group.add_argument('--parent', metavar='KEY', help='Print the quadkey of the containing tile')
        group.add_argument('--children', metavar='KEY', help='Print the quadkeys of the four contained tiles')
        parser.add_argument('--config', help='Path to JSON configuration file')
        parser.add_argument('--truncate', action='store_true',
                            help='Drop high-order bits of out-of-range coordinates instead of failing')
        return parser

    def run(self, args: argparse.Namespace) -> int:
        """Execute a parsed command"""
        if args.truncate:
            self.use_truncation()

        try:
            if args.tile is not None:
                x, y, z = args.tile
                print(self.encode_tile(x, y, z))
            elif args.key is not None:
                coords = self.decode_key(args.key)
                print(f"{coords['x']} {coords['y']} {coords['z']}")
            elif args.parent is not None:
                print(self.quadkey_service.parent(args.parent))
            elif args.children is not None:
                print(' '.join(self.quadkey_service.children(args.children)))
        except QuadKeyException as e:
            logger.debug("Conversion failed: %s", e)
            print(f"Error: {e}")
            return 1

        return 0

    @classmethod
    def run_from_command_line(cls, argv: Optional[List[str]] = None) -> int:
        """Run quadkey command-line interface"""
        args = cls.build_parser().parse_args(argv)
        try:
            manager = cls(args.config)
        except QuadKeyException as e:
            print(f"Error: {e}")
            return 1
        LoggingManager.setup_logging(manager.config)
        return manager.run(args)
