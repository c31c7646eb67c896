"""Interception hook for the `secret` property.

Two renditions of the same contract live here:

- HOOK_SCRIPT: the JavaScript injected into the browser before any page
  script runs. It traps writes to `secret` on Object.prototype.
- SecretInterceptor: an in-process model of the hook. Python has no
  prototype-wide property trap, so writes go through an explicit
  `set_secret(instance, value)` and a registry keyed by instance identity
  decides whether the trap still fires for that instance.

Contract shared by both:
- install() is idempotent (guarded by a persistent marker)
- the trap fires at most once per instance
- the instance's version is read at write time, not later
- anything raised while recording is swallowed; the write always lands
"""

from typing import Any, Dict, List, Optional

from secretgrab.kernel.capture import CaptureSession, read_field

HOOK_MARKER = "__secretHookInstalled"
CAPTURES_GLOBAL = "__captures"
TRAPPED_PROPERTY = "secret"
VERSION_PROPERTY = "version"

HOOK_SCRIPT = (
    "(()=>{if(globalThis.%(marker)s)return;"
    "globalThis.%(marker)s=true;"
    "globalThis.%(captures)s=[];"
    "Object.defineProperty(Object.prototype,'%(prop)s',{configurable:true,set:function(v){"
    "try{%(captures)s.push({secret:v,version:this.%(version)s,obj:this});}catch(e){}"
    "Object.defineProperty(this,'%(prop)s',{value:v,writable:true,configurable:true,enumerable:true});}});"
    "})();"
) % {
    "marker": HOOK_MARKER,
    "captures": CAPTURES_GLOBAL,
    "prop": TRAPPED_PROPERTY,
    "version": VERSION_PROPERTY,
}

# Projects each capture down to plain data before it crosses the page boundary.
# `obj` is reduced to its version field, read at snapshot time.
READ_CAPTURES_SCRIPT = (
    "() => (globalThis.%(captures)s || []).map(c => {"
    "let nested;"
    "try { nested = c.obj ? c.obj.%(version)s : undefined; } catch (e) { nested = undefined; }"
    "return {secret: c.secret, version: c.version, obj: {version: nested}};"
    "})"
) % {
    "captures": CAPTURES_GLOBAL,
    "version": VERSION_PROPERTY,
}


def _write_field(instance: Any, name: str, value: Any) -> None:
    if isinstance(instance, dict):
        instance[name] = value
    else:
        setattr(instance, name, value)


class SecretInterceptor:
    """Observer for writes to the `secret` field of arbitrary objects.

    Callers modelling "an object with a secret field" must write through
    set_secret(); direct assignment bypasses the trap, the same way a write
    to an instance that already owns its property bypasses it in the page.

    Every trapped instance is held by a strong reference for the lifetime of
    the interceptor, so ids cannot be reused by a later object. Plain dicts
    are valid instances and cannot be weakly referenced, so the registry is an
    ordinary dict; discard the interceptor to release them.
    """

    def __init__(self, session: Optional[CaptureSession] = None):
        self.session = session if session is not None else CaptureSession()
        # id(instance) -> instance; holding the reference keeps ids stable
        self._trapped: Dict[int, Any] = {}

    @property
    def installed(self) -> bool:
        return self.session.hook_installed

    def install(self) -> bool:
        """Install the trap. Returns False if it was already installed."""
        if self.session.hook_installed:
            return False
        self.session.hook_installed = True
        return True

    def set_secret(self, instance: Any, value: Any) -> None:
        """Write `value` to `instance.secret`, recording the first write per instance."""
        if self.session.hook_installed and id(instance) not in self._trapped:
            self._trapped[id(instance)] = instance
            try:
                version = read_field(instance, VERSION_PROPERTY)
                self.session.append({
                    "secret": value,
                    "version": version,
                    "obj": instance,
                })
            except Exception:
                # Recording must never break the host write.
                pass
        _write_field(instance, TRAPPED_PROPERTY, value)

    def owns(self, instance: Any) -> bool:
        """True once the instance has passed through the trap."""
        return id(instance) in self._trapped

    def captures(self) -> List[Dict[str, Any]]:
        return list(self.session.snapshot())
