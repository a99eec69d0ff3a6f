#Main constants
import numpy as np

kbltzSI = 1.38e-23 #Boltzmann constant [J/K]
MpSI    = 1.67e-27 #Proton mass [kg]
gamma   = 5/3.0    #Adiabatic index
CsSW    = 4.0e+4   #Background solar wind sound speed [m/s]

def refTemp(Cs=CsSW,Mi=MpSI,gam=gamma,kb=kbltzSI):
	"""
	Temperature [K] of a plasma with sound speed Cs [m/s]
	T = Mi*Cs^2/(gamma*kb)
	"""
	return Mi*np.square(Cs)/(gam*kb)

#Reference (background) temperature [K]
Tref = refTemp()
