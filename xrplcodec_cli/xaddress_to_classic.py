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

import sys
from argparse import ArgumentParser, Namespace


def create_parser() -> ArgumentParser:
    from xrplcodec_cli.util import create_parser
    parser = create_parser()
    parser.add_argument('xaddress', help='X-address')
    return parser


def execute(args: Namespace) -> int:
    from xrplcodec import xaddress_to_classic_address
    from xrplcodec.exceptions import XRPLCodecError
    from xrplcodec_cli.util import print_json

    try:
        classic_address, tag, is_test_network = xaddress_to_classic_address(args.xaddress)
    except XRPLCodecError as e:
        print('Error: {}'.format(e), file=sys.stderr)
        return 1
    print_json({
        'classic_address': classic_address,
        'tag': tag,
        'is_test_network': is_test_network,
    })
    return 0


def main():
    parser = create_parser()
    args = parser.parse_args()
    return execute(args)
