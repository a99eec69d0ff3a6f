"""
Density perturbation of a Gaussian-enveloped ULF wave packet.

Single tone:
    dn(t) = A*exp(-((t-ts)/tau)^2)*sin(2 pi f (t-ts))

Broadband: fn tones spaced DFBAND apart across [f(1-bw), f(1+bw)], each with
a uniform random phase and amplitude A/sqrt(fn) so the expected power does not
depend on how finely the band is sampled.

A = ampFrac*n0, tau = nWaves/f.
"""
import logging
import numpy as np

from ulfpy.ulfErrors import ULFConfigError

logger = logging.getLogger(__name__)

DFBAND = 1.0e-4 #Tone spacing inside the band [Hz]

def getRNG(seed=None):
    """ Random source for the broadband phases, seed=None draws fresh entropy """
    return np.random.default_rng(seed)

def bandCount(wave, df=DFBAND):
    """ Number of tones across the band, 0 when the band is narrower than df/2
        Rounds half up, a band of exactly 2.5 steps holds 3 tones
    """
    fSpan = 2.0*wave.bwFrac*wave.freq
    return int(np.floor(fSpan/df + 0.5))

def toneGrid(wave, df=DFBAND):
    """ Tone frequencies [Hz], starting at the lower band edge """
    fMin = wave.freq*(1.0 - wave.bwFrac)
    fn = bandCount(wave, df)
    return fMin + df*np.arange(fn)

def envelope(t, ts, tau):
    return np.exp(-np.square((t-ts)/tau))

def synthPerturbation(t, wave, n0, ts, rng=None):
    """
    Density perturbation dn(t) [#/cc] for each sample in t [s]

    Parameters:
      t:    sample times [s]
      wave: WaveParams
      n0:   background density [#/cc]
      ts:   packet center [s]
      rng:  numpy Generator for the broadband phases (unused for a single tone)
    """
    if not (n0 > 0):
        raise ULFConfigError('n0', "background density must be > 0, got %s"%(n0))
    t = np.asarray(t, dtype=float)

    An1 = wave.ampFrac*n0
    dT = t - ts
    env = envelope(t, ts, wave.tau)

    fn = 0 if wave.isMono else bandCount(wave)
    if (fn == 0):
        if not wave.isMono:
            logger.warning("Band %g*f narrower than tone spacing %g Hz, using a single tone"%(wave.bwFrac,DFBAND))
        logger.debug("Single tone at %g Hz, tau = %g s"%(wave.freq,wave.tau))
        return An1*env*np.sin(2*np.pi*wave.freq*dT)

    if rng is None:
        rng = getRNG()
    farr = toneGrid(wave)
    phi = rng.uniform(0.0, 2*np.pi, fn)
    #Equal power split across tones
    An1 = An1/np.sqrt(fn)
    logger.debug("Broadband packet: %d tones in [%g,%g] Hz, tau = %g s"%(fn,farr[0],farr[-1],wave.tau))

    dn = np.zeros_like(t)
    for fi,phii in zip(farr, phi):
        dn += np.sin(2*np.pi*fi*dT + phii)
    return An1*env*dn
