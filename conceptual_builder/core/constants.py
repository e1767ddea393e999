"""
    Copyright 2018 EPAM Systems, Inc.

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.
"""
BUILDER_COMMAND_NAME = 'builder'
MINIMAL_ACTION = 'minimal'
FULL_ACTION = 'full'
CUSTOM_ACTION = 'custom'
DEMO_ACTION = 'demo'

PARTS_BUILDER = 'parts'
MANIFEST_BUILDER = 'manifest'
ALLOWED_BUILDERS = [PARTS_BUILDER, MANIFEST_BUILDER]

PART_A = 'a'
PART_B = 'b'
PART_C = 'c'
ALLOWED_PARTS = [PART_A, PART_B, PART_C]

MINIMAL_PRODUCT_HEADING = 'Standard basic product:'
FULL_PRODUCT_HEADING = 'Standard full featured product:'
CUSTOM_PRODUCT_HEADING = 'Custom product:'

CONF_PATH_ENV = 'BUILDER_CONF'

OK_RETURN_CODE = 0
FAILED_RETURN_CODE = 1
