"""Quiet, private defaults: no UI sounds, telemetry, Siri, suggestions or hot corners.

Only the `defaults` mutations are expressed here; firmware (nvram), AppleScript,
systemsetup and cupsctl changes are outside the directive model.

Two settings are expressed through the store tiers instead of raw commands:
Handoff (useractivityd) uses the `current_host` scope, which addresses the same
`~/Library/Preferences/ByHost` plist as writing that path directly. The
screensaver `idleTime` is written as an integer 0; an untyped `defaults write`
would store the string "0".
"""

from ..ApplicationPlan import ApplicationPlan
from ..Directive import Directive
from ..RestartTarget import RestartTarget

POWERCHIME = RestartTarget(name="PowerChime")
FINDER = RestartTarget(name="Finder")
DOCK = RestartTarget(name="Dock")
SYSTEMUISERVER = RestartTarget(name="SystemUIServer")

GLOBAL_DOMAIN = "NSGlobalDomain"
CRASH_REPORTER_HISTORY = "/Library/Application Support/CrashReporter/DiagnosticMessagesHistory.plist"
PROFILE_MANAGER = "/Library/Application Support/com.apple.security.profilemanager"
LOCATIOND = "/var/db/locationd/Library/Preferences/ByHost/com.apple.locationd"
HOT_CORNERS = ("wvous-tl-corner", "wvous-tr-corner", "wvous-bl-corner", "wvous-br-corner")


def _audio() -> list[Directive]:
    # Sounds are cosmetic: best-effort
    return [
        Directive.write("com.apple.systemsound", "com.apple.sound.uiaudio.enabled", 0, required=False),
        Directive.write(GLOBAL_DOMAIN, "com.apple.sound.uiaudio.enabled", False, required=False),
        Directive.write(GLOBAL_DOMAIN, "com.apple.sound.beep.feedback", False, required=False),
        Directive.write("com.apple.finder", "FinderSounds", False, required=False, restarts=(FINDER.name,)),
        Directive.write(
            "com.apple.PowerChime", "ChimeOnNoHardware", True, required=False, restarts=(POWERCHIME.name,)
        ),
    ]


def _privacy() -> list[Directive]:
    return [
        Directive.write(LOCATIOND, "LocationServicesEnabled", 0, scope="system"),
        Directive.write(CRASH_REPORTER_HISTORY, "AutoSubmit", False, scope="system"),
        Directive.write("com.apple.CrashReporter", "DialogType", "none"),
        Directive.write(PROFILE_MANAGER, "SubmitDiagInfo", False, scope="system"),
        Directive.write("com.apple.appstore", "SendProductTelemetry", False),
    ]


def _sharing() -> list[Directive]:
    return [
        Directive.write("com.apple.NetworkBrowser", "DisableAirDrop", True, restarts=(FINDER.name,)),
        Directive.write("com.apple.coreservices.useractivityd", "ActivityAdvertisingAllowed", False, scope="current_host"),
        Directive.write("com.apple.coreservices.useractivityd", "ActivityReceivingAllowed", False, scope="current_host"),
    ]


def _siri_and_search() -> list[Directive]:
    return [
        Directive.write("com.apple.assistant.support", "Assistant Enabled", False),
        Directive.write("com.apple.Siri", "StatusMenuVisible", False, restarts=(SYSTEMUISERVER.name,)),
        Directive.write("com.apple.Siri", "UserHasDeclinedEnable", True),
        Directive.write(
            "com.apple.systemuiserver", "NSStatusItem Visible Siri", False, restarts=(SYSTEMUISERVER.name,)
        ),
        Directive.write("com.apple.safari", "UniversalSearchEnabled", False),
    ]


def _interface() -> list[Directive]:
    return [
        Directive.write("com.apple.screensaver", "idleTime", 0, scope="current_host"),
        Directive.write("com.apple.finder", "QLInlinePreviewDisabled", True, restarts=(FINDER.name,)),
        *(Directive.write("com.apple.dock", corner, 0, restarts=(DOCK.name,)) for corner in HOT_CORNERS),
        Directive.write("com.apple.finder", "FXEnableRemoveFromICloudDriveWarning", False, restarts=(FINDER.name,)),
        Directive.write("com.apple.Safari", "SuppressSearchSuggestions", True),
    ]


def privacy_defaults() -> ApplicationPlan:
    return ApplicationPlan(
        name="privacy-defaults",
        aliases=("apply-privacy-defaults",),
        description="Disable UI sounds, telemetry, location, AirDrop, Handoff, Siri, suggestions and hot corners",
        directives=(*_audio(), *_privacy(), *_sharing(), *_siri_and_search(), *_interface()),
        restart_order=(POWERCHIME, FINDER, DOCK, SYSTEMUISERVER),
    )
