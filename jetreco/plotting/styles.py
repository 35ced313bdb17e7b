"""
Presentation policy for the plot programs: per-page layout, colors, axis
ranges, legends and Gaussian fit windows. Colors are ROOT color names
('kGreen+2') resolved at draw time, so this module does not import ROOT.

A page is a dict (see page()) whose 'hists' entry lists
(histogram name, color, legend label) in drawing order. The first
histogram carries the frame: titles, ranges and stats box.
"""

page_defaults = {
	'hists': [],
	'logx': False,
	'logy': False,
	'title': None,
	'xtitle': None,
	'ytitle': None,
	'ztitle': None,
	'xrange': None,
	'yrange': None,
	'zrange': None,
	'gev': False,
	'normalize': False,
	'fit': False,
	'draw': '',
	'legend': None,
	'more_log_labels': False,
}

# response fit windows (low, high) in units of pT(reco)/pT(truth)
fit_windows = {
	'Step5_response_reco_pt20': (0.7, 1.6),
	'Step5_response_reco_pt100': (0.8, 1.2),
	'Step5_response_reco_pt1000': (0.8, 1.2),
	'Step5_response_track_pt20': (0.3, 1.1),
	'Step5_response_track_pt100': (0.3, 1.0),
	'Step5_response_track_pt1000': (0.2, 1.0),
}

sigma_over_mu_label = '{}, #sigma/#mu = {:.2f}'


def page(**kwargs):
	unknown = set(kwargs) - set(page_defaults)
	if unknown:
		raise KeyError('unknown page settings: {}'.format(sorted(unknown)))
	p = dict(page_defaults)
	p.update(kwargs)
	return p


def page_hist_names(pages):
	names = []
	for p in pages:
		for name, _, _ in p['hists']:
			if name not in names:
				names.append(name)
	return names


#----------------------------------------------------------------
# R=0.4 jets
#----------------------------------------------------------------
mu_regimes = [('high', 'kRed', '#mu > 50'), ('mid', 'kBlue', '35 < #mu < 45'), ('low', 'kGreen+2', '#mu < 30')]

def _njets_page(stem, label):
	return page(hists=[('{}_njets_{}mu'.format(stem, r), c, l) for r, c, l in mu_regimes],
				normalize=True, xtitle='Number of jets', ytitle='Weighted fraction of events',
				title='Number of {} jets with p_{{T}} > 20 GeV'.format(label),
				yrange=(1.e-3, 1.), legend=(0.50, 0.65, 0.70, 0.80))

def _profile_page(name):
	return page(hists=[(name, 'kBlack', None)], draw='colz',
				xtitle='Average number of interactions', ytitle='Number of primary vertices',
				ztitle='Average number of jets', zrange=(0, 80))

def _response_page(kind, label):
	return page(hists=[('Step5_response_{}_pt{}'.format(kind, f), c, 'p_{{T}}^{{truth}} > {} GeV'.format(f))
					   for f, c in [(20, 'kRed'), (100, 'kBlue'), (1000, 'kGreen+2')]],
				normalize=True, fit=True, xtitle='Jet response', ytitle='Weighted fraction of events',
				title='{} jet p_{{T}} response, p_{{T}}^{{{}}}/p_{{T}}^{{truth}}'.format(label.capitalize(), label),
				yrange=(0, 0.25), legend=(0.12, 0.65, 0.45, 0.85))

_jet_pt_frame = dict(logx=True, logy=True, gev=True, more_log_labels=True,
					 xtitle='Jet p_{T} [GeV]', ytitle='Weighted number of events', title='Leading R=0.4 jet p_{T}')

exp_pages = {
	1: [
		page(hists=[('Step1_mu', 'kBlack', None)],
			 xtitle='Average number of interactions', ytitle='Number of events'),
		page(hists=[('Step1_npv', 'kBlack', None)],
			 xtitle='Number of primary vertices', ytitle='Number of events'),
		page(hists=[('Step1_mu_npv', 'kBlack', None)], draw='colz',
			 title='Number of events vs #mu_{average} and NPV',
			 xtitle='Average number of interactions', ytitle='Number of primary vertices'),
	],
	2: [
		page(hists=[('Step2_TruthJet_pt_noweight', 'kRed', 'Truth jet'),
					('Step2_RecoJet_pt_noweight', 'kBlue', 'Cluster jet')],
			 gev=True, xtitle='Jet p_{T} [GeV]', ytitle='Number of events',
			 title='Leading R=0.4 jet p_{T}, no weights', yrange=(0, 4000),
			 legend=(0.50, 0.65, 0.89, 0.75)),
		page(hists=[('Step2_TruthJet_pt', 'kRed', 'Truth jet'),
					('Step2_RecoJet_pt', 'kBlue', 'Cluster jet')],
			 legend=(0.50, 0.65, 0.89, 0.75), **_jet_pt_frame),
	],
	3: [
		_njets_page('Step3_RecoJet', 'cluster'),
		_njets_page('Step3_TruthJet', 'truth'),
		_profile_page('Step3_RecoJets_njets_2D'),
		_profile_page('Step3_TruthJets_njets_2D'),
	],
	4: [
		page(hists=[('Step4_RecoJet_jvf_pt20', 'kRed', 'p_{T} > 20 GeV'),
					('Step4_RecoJet_jvf_pt60', 'kBlue', 'p_{T} > 60 GeV'),
					('Step4_RecoJet_jvf_pt100', 'kGreen+2', 'p_{T} > 100 GeV')],
			 normalize=True, xtitle='Leading jet JVF', ytitle='Weighted fraction of events',
			 title='Leading jet JVF distribution', yrange=(0, 0.4), legend=(0.60, 0.55, 0.80, 0.75)),
		page(hists=[('Step2_TruthJet_pt', 'kRed', 'Truth jet'),
					('Step2_RecoJet_pt', 'kBlue', 'Cluster jet'),
					('Step4_RecoJet_pt_jvf', 'kGreen+2', 'Cluster jet, |JVF|>0.5')],
			 legend=(0.50, 0.60, 0.89, 0.75), **_jet_pt_frame),
		_njets_page('Step4_TrackJet', 'track'),
		_profile_page('Step4_TrackJets_njets_2D'),
		page(hists=[('Step2_TruthJet_pt', 'kRed', 'Truth jet'),
					('Step4_RecoJet_pt_jvf', 'kGreen+2', 'Cluster jet, |JVF|>0.5'),
					('Step4_TrackJet_pt', 'kViolet', 'Track jet')],
			 legend=(0.50, 0.74, 0.89, 0.89), **_jet_pt_frame),
	],
	5: [
		page(hists=[('Step5_DRtruth_reco', 'kRed', 'Cluster jets'),
					('Step5_DRtruth_reco_jvf', 'kGreen+2', 'Cluster jets, |JVF|>0.5'),
					('Step5_DRtruth_track', 'kViolet', 'Track jets')],
			 normalize=True, xtitle='Delta R', ytitle='Fraction of events',
			 title='Delta R from the leading truth jet', yrange=(0, 1), legend=(0.40, 0.65, 0.75, 0.85)),
		_response_page('reco', 'cluster'),
		_response_page('track', 'track'),
	],
}


#----------------------------------------------------------------
# R=1.0 jets
#----------------------------------------------------------------
groom_variants = [('Pruned', 'kGreen+2', 'Pruned jets'),
				  ('SD', 'kViolet', 'Soft Drop jets'),
				  ('RSD', 'kCyan', 'Recursive Soft Drop jets'),
				  ('BUSD', 'kOrange+1', 'Bottom-Up Soft Drop jets'),
				  ('BUSDT', 'kBlack', 'Tighter Bottom-Up Soft Drop jets')]

def _substructure_page(var, xtitle, yhigh, legend):
	hists = [('Step5_Ungroomed_{}'.format(var), 'kRed', 'Ungroomed jets'),
			 ('Step5_Trimmed_{}'.format(var), 'kBlue', 'Trimmed jets')]
	hists += [('Step5_{}_{}'.format(tag, var), c, l) for tag, c, l in groom_variants]
	return page(hists=hists, normalize=True, xtitle=xtitle, ytitle='Fraction of weighted events',
				title='Leading R=1.0 jet {}, p_{{T}} > 400 GeV'.format(xtitle.replace('Jet ', '')),
				yrange=(0, yhigh), legend=legend)

_large_r_pt_frame = dict(logx=True, logy=True, gev=True, more_log_labels=True,
						 xtitle='Jet p_{T} [GeV]', ytitle='Weighted number of events')

groom_pages = {
	1: [
		page(hists=[('Step1_mu', 'kBlack', None)],
			 xtitle='Average number of interactions', ytitle='Number of events'),
		page(hists=[('Step1_npv', 'kBlack', None)],
			 xtitle='Number of primary vertices', ytitle='Number of events'),
	],
	2: [
		page(hists=[('Step2_UngroomPt_noweight', 'kRed', None)],
			 gev=True, xtitle='Jet p_{T} [GeV]', ytitle='Number of events'),
		page(hists=[('Step2_UngroomPt', 'kRed', 'Leading ungroomed R=1.0 jet p_{T}'),
					('Step2_TrimmedPt', 'kBlue', None)],
			 title='Leading R=1.0 jet p_{T}', legend=(0.50, 0.65, 0.89, 0.75), **_large_r_pt_frame),
		page(hists=[('Step2_UngroomMass', 'kRed', 'Leading ungroomed R=1.0 jet mass'),
					('Step2_TrimmedMass', 'kBlue', None)],
			 logx=True, logy=True, gev=True, more_log_labels=True,
			 xtitle='Jet mass [GeV]', ytitle='Weighted number of events',
			 title='Leading R=1.0 jet mass, p_{T} > 400 GeV', legend=(0.15, 0.15, 0.55, 0.25)),
	],
	3: [
		page(hists=[('Step3_MyUngroomPt_noweight', 'kBlue', 'Rebuilt jets'),
					('Step2_UngroomPt_noweight', 'kRed', 'Original jets')],
			 gev=True, xtitle='Jet p_{T} [GeV]', ytitle='Number of events',
			 title='Leading ungroomed R=1.0 jet p_{T}, no weights', legend=(0.50, 0.65, 0.89, 0.75)),
		page(hists=[('Step3_MyUngroomPt', 'kBlue', 'Rebuilt jets'),
					('Step2_UngroomPt', 'kRed', 'Original jets')],
			 title='Leading ungroomed R=1.0 jet p_{T}', legend=(0.50, 0.65, 0.89, 0.75), **_large_r_pt_frame),
		page(hists=[('Step3_MyTrimmedPt', 'kBlue', 'Rebuilt jets'),
					('Step2_TrimmedPt', 'kRed', 'Original jets')],
			 title='Leading trimmed R=1.0 jet p_{T}', legend=(0.50, 0.65, 0.89, 0.75), **_large_r_pt_frame),
	],
	4: [
		page(hists=[('Step3_MyUngroomPt', 'kRed', 'Ungroomed jets'),
					('Step3_MyTrimmedPt', 'kBlue', 'Trimmed jets')]
				   + [('Step4_My{}Pt'.format(tag), c, l) for tag, c, l in groom_variants],
			 title='Leading R=1.0 jet p_{T}', xrange=(150, 1000),
			 legend=(0.50, 0.5, 0.89, 0.75), **_large_r_pt_frame),
		page(hists=[('Step2_UngroomMass', 'kRed', 'Ungroomed jets'),
					('Step2_TrimmedMass', 'kBlue', 'Trimmed jets')]
				   + [('Step4_My{}Mass'.format(tag), c, l) for tag, c, l in groom_variants],
			 logx=True, logy=True, gev=True, normalize=True, more_log_labels=True,
			 xtitle='Jet mass [GeV]', ytitle='Fraction of weighted events',
			 title='Leading R=1.0 jet mass, p_{T} > 400 GeV', xrange=(10, 500), yrange=(1.e-4, 2.5e-1),
			 legend=(0.12, 0.12, 0.52, 0.37)),
	],
	5: [
		_substructure_page('D2', 'Jet D_{2}^{#beta=1}', 0.2, (0.50, 0.64, 0.89, 0.89)),
		_substructure_page('Tau32', 'Jet #tau_{32}^{WTA}', 0.5, (0.15, 0.64, 0.54, 0.89)),
	],
}
