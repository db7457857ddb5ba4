import pytest

from scratch_org_factory.domain.scratch_org.settings_generator import SettingsGenerator


@pytest.mark.asyncio
async def test_extract_settings_sections():
    generator = SettingsGenerator()

    await generator.extract(
        {
            "edition": "Developer",
            "settings": {"mobileSettings": {"enableS1EncryptedStoragePref2": False}, "chatterSettings": {}},
            "objectSettings": {"opportunity": {"sharingModel": "private"}},
        }
    )

    assert generator.has_settings()
    assert generator.settings_data["mobileSettings"] == {"enableS1EncryptedStoragePref2": False}
    assert generator.object_settings_data == {"opportunity": {"sharingModel": "private"}}
    assert generator.get_settings_names() == ["ChatterSettings", "MobileSettings"]


@pytest.mark.asyncio
async def test_definition_without_settings():
    generator = SettingsGenerator()

    await generator.extract({"edition": "Developer", "settings": {}})

    assert not generator.has_settings()
    assert generator.settings_data is None
    assert generator.get_settings_names() == []
