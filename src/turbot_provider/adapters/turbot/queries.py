"""GraphQL documents sent to the Turbot API."""

from __future__ import annotations

from typing import Final

VALIDATE: Final[str] = """
query Validate {
  schema: __schema {
    queryType {
      name
    }
  }
}
"""

_POLICY_SETTING_FIELDS: Final[str] = """
    value
    valueSource
    default
    precedence
    template
    templateInput
    input
    note
    validFromTimestamp
    validToTimestamp
    turbot {
      id
      parentId
      resourceId
      akas
    }
"""

_RESOURCE_METADATA_FIELDS: Final[str] = """
      id
      parentId
      akas
      title
      tags
      custom
      metadata
      path
      state
      resourceTypeId
      resourceGroupIds
      versionId
      actorIdentityId
      actorPersonaId
      actorRoleId
      createTimestamp
      updateTimestamp
      deleteTimestamp
"""

CREATE_POLICY_SETTING: Final[str] = f"""
mutation CreatePolicySetting($input: CreatePolicySettingInput!) {{
  policySetting: createPolicySetting(input: $input) {{
{_POLICY_SETTING_FIELDS}
  }}
}}
"""

READ_POLICY_SETTING: Final[str] = f"""
query PolicySetting($id: ID!) {{
  policySetting(id: $id) {{
{_POLICY_SETTING_FIELDS}
  }}
}}
"""

UPDATE_POLICY_SETTING: Final[str] = """
mutation UpdatePolicySetting($input: UpdatePolicySettingInput!) {
  policySetting: updatePolicySetting(input: $input) {
    turbot {
      id
    }
  }
}
"""

DELETE_POLICY_SETTING: Final[str] = """
mutation DeletePolicySetting($input: DeletePolicySettingInput!) {
  policySetting: deletePolicySetting(input: $input) {
    turbot {
      id
    }
  }
}
"""

FIND_POLICY_SETTINGS: Final[str] = f"""
query FindPolicySettings($filter: [String!]) {{
  policySettings(filter: $filter) {{
    items {{
{_POLICY_SETTING_FIELDS}
    }}
  }}
}}
"""

READ_POLICY_VALUE: Final[str] = f"""
query PolicyValue($policyTypeUri: String!, $resourceAka: ID!) {{
  policyValue(uri: $policyTypeUri, resourceId: $resourceAka) {{
    value
    precedence
    state
    reason
    details
    setting {{
{_POLICY_SETTING_FIELDS}
    }}
    turbot {{
      id
      parentId
      resourceId
      akas
    }}
  }}
}}
"""

CREATE_GRANT: Final[str] = """
mutation CreateGrants($input: CreateGrantsInput!) {
  grants: createGrants(input: $input) {
    turbot {
      id
      profileId
      resourceId
    }
  }
}
"""

READ_GRANT: Final[str] = """
query Grant($id: ID!) {
  grant(id: $id) {
    permissionTypeId
    permissionLevelId
    turbot {
      id
      profileId
      resourceId
    }
  }
}
"""

DELETE_GRANT: Final[str] = """
mutation DeleteGrant($input: DeleteGrantInput!) {
  grant: deleteGrant(input: $input) {
    turbot {
      id
    }
  }
}
"""

READ_RESOURCE: Final[str] = f"""
query Resource($id: ID!) {{
  resource(id: $id) {{
    data
    turbot {{
{_RESOURCE_METADATA_FIELDS}
    }}
  }}
}}
"""

READ_RESOURCE_AKAS: Final[str] = """
query ResourceAkas($id: ID!) {
  resource(id: $id) {
    turbot {
      id
      akas
    }
  }
}
"""
