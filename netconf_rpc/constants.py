"""
Copyright 2024 Nomios UK&I

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

BASE_NS_1_0 = "urn:ietf:params:xml:ns:netconf:base:1.0"

RPC_TEMPLATE = '<rpc message-id="{message_id}" xmlns="{xmlns}">{body}</rpc>'

LOCK_TEMPLATE = "<lock><target><{target}/></target></lock>"
UNLOCK_TEMPLATE = "<unlock><target><{target}/></target></unlock>"
GET_CONFIG_TEMPLATE = "<get-config><source><{source}/></source></get-config>"
GET_TEMPLATE = '<get><filter type="{filter_type}">{filter_body}</filter></get>'
EDIT_CONFIG_TEMPLATE = """<edit-config>
<target><{target}/></target>
<default-operation>merge</default-operation>
<error-option>rollback-on-error</error-option>
<config>{config}</config>
</edit-config>"""

CHUNK_MARKER = "#"
END_OF_MESSAGE = "]]>]]>"
BASE_10_TEMPLATE = "{content}]]>]]>"
BASE_11_TEMPLATE = "\n#{length}\n{content}\n##\n"
