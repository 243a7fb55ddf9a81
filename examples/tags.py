"""Code-first status tags shared by the examples."""

from gameplaytags import declare_tag


class Status:
    SLOW = declare_tag("Status.Debuff.Slow")
    STUN = declare_tag("Status.Debuff.Stun")
    HASTE = declare_tag("Status.Buff.Haste")
    DEBUFF = declare_tag("Status.Debuff")
    BUFF = declare_tag("Status.Buff")
