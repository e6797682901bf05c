# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from argparse import ArgumentParser, Namespace


def create_parser() -> ArgumentParser:
    from xrplcodec_cli.util import create_parser
    parser = create_parser()
    parser.add_argument('address', help='Classic address or X-address')
    return parser


def execute(args: Namespace) -> int:
    """Print the kind of address, exits with 1 when it is not valid."""
    from xrplcodec import is_valid_classic_address, is_valid_xaddress

    if is_valid_classic_address(args.address):
        print('valid classic address')
        return 0
    if is_valid_xaddress(args.address):
        print('valid X-address')
        return 0
    print('invalid address')
    return 1


def main():
    parser = create_parser()
    args = parser.parse_args()
    return execute(args)
